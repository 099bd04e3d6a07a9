"""
Checklist API Router.

Drives the Controller the way the page's controls would:
- GET  /api/v1/languages   ← selector options
- GET  /api/v1/state       ← current render, selection and output
- PUT  /api/v1/language    ← "language selected" event
- PUT  /api/v1/selection   ← checkbox state
- POST /api/v1/generate    ← "generate requested" event
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from lingosheet.api.deps import get_controller
from lingosheet.controller import Controller
from lingosheet.schemas import OutputList, RenderedState

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["checklist"])


# ── Request / response models ──────────────────────────────────────────


class LanguageChange(BaseModel):
    lang: str = Field(..., min_length=1)


class SelectionUpdate(BaseModel):
    keys: list[str] = Field(default_factory=list)


class GenerateRequest(BaseModel):
    keys: Optional[list[str]] = None    # None = use the tracked selection


class LanguagesResponse(BaseModel):
    base_language: str
    active_language: Optional[str]
    available: list[str]
    unavailable: dict[str, str]


class StateResponse(BaseModel):
    active_language: str
    rendered: RenderedState
    selection: list[str]
    output: Optional[OutputList] = None


def _state_response(controller: Controller) -> StateResponse:
    state = controller.state
    selected = controller.selection
    return StateResponse(
        active_language=controller.active_language,
        rendered=state,
        selection=[key for key in state.instruction_keys if key in selected],
        output=controller.output,
    )


# ── Routes ─────────────────────────────────────────────────────────────


@router.get("/languages", response_model=LanguagesResponse)
async def list_languages(controller: Controller = Depends(get_controller)):
    report = controller.loader.report
    return LanguagesResponse(
        base_language=controller.base_language,
        active_language=controller.active_language,
        available=controller.available_languages,
        unavailable=dict(report.failed) if report else {},
    )


@router.get("/state", response_model=StateResponse)
async def get_state(controller: Controller = Depends(get_controller)):
    controller.require_ready()
    return _state_response(controller)


@router.put("/language", response_model=StateResponse)
async def change_language(
    body: LanguageChange,
    controller: Controller = Depends(get_controller),
):
    controller.on_language_change(body.lang)
    return _state_response(controller)


@router.put("/selection", response_model=StateResponse)
async def update_selection(
    body: SelectionUpdate,
    controller: Controller = Depends(get_controller),
):
    controller.set_selection(body.keys)
    return _state_response(controller)


@router.post("/generate", response_model=OutputList)
async def generate(
    body: GenerateRequest,
    controller: Controller = Depends(get_controller),
):
    output = controller.on_generate(body.keys)
    logger.info(
        "sheet_generated",
        language=controller.active_language,
        entries=len(output.entries),
        empty_state=output.empty_state,
    )
    return output
