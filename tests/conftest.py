"""
Pytest Configuration and Fixtures.

Provides:
- In-memory bundle documents (en / es) and store builders
- A dict-backed BundleSource with programmable failures
- An httpx MockTransport-backed HttpBundleSource
- A recording RenderSink
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from lingosheet.controller import Controller
from lingosheet.loader import Loader
from lingosheet.renderer import Renderer
from lingosheet.schemas import OutputList, RenderedState, TranslationBundle
from lingosheet.sources import HttpBundleSource
from lingosheet.store import ResourceStore


EN_DOC: dict[str, Any] = {
    "ui": {"title": "Instruction Sheet", "generate_button": "Generate"},
    "instructions": {"i1": "Step one", "i2": "Step two"},
}

ES_DOC: dict[str, Any] = {
    "ui": {"title": "Hoja de instrucciones"},
    "instructions": {"i1": "Paso uno", "i2": "Paso dos"},
}

STATIC_KEYS = ["ui.title", "ui.generate_button"]


# ============================================================================
# HELPERS
# ============================================================================


class DictSource:
    """BundleSource serving documents from memory; values may be exceptions."""

    def __init__(self, documents: dict[str, Any]):
        self.documents = documents
        self.fetched: list[str] = []

    async def fetch(self, code: str) -> bytes:
        self.fetched.append(code)
        if code not in self.documents:
            raise FileNotFoundError(f"{code}.json")
        value = self.documents[code]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, bytes):
            return value
        return json.dumps(value).encode("utf-8")


class RecordingSink:
    """RenderSink that remembers everything it was asked to paint."""

    def __init__(self):
        self.states: list[RenderedState] = []
        self.outputs: list[Optional[OutputList]] = []
        self.alerts: list[str] = []

    def paint_state(self, state: RenderedState) -> None:
        self.states.append(state)

    def paint_output(self, output: Optional[OutputList]) -> None:
        self.outputs.append(output)

    def alert(self, message: str) -> None:
        self.alerts.append(message)


def make_store(**documents: dict[str, Any]) -> ResourceStore:
    store = ResourceStore()
    for code, doc in documents.items():
        store.add(TranslationBundle.from_document(code, doc))
    store.seal()
    return store


def http_source(routes: dict[str, Any], base_url: str = "https://cdn.test/translations") -> HttpBundleSource:
    """
    HttpBundleSource over a MockTransport.

    ``routes`` maps language code → document (200) or int status code.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        code = request.url.path.rsplit("/", 1)[-1].removesuffix(".json")
        value = routes.get(code, 404)
        if isinstance(value, int):
            return httpx.Response(value, text="not found" if value == 404 else "error")
        if isinstance(value, bytes):
            return httpx.Response(200, content=value)
        return httpx.Response(200, json=value)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpBundleSource(base_url, client=client)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def en_doc() -> dict[str, Any]:
    return json.loads(json.dumps(EN_DOC))


@pytest.fixture
def es_doc() -> dict[str, Any]:
    return json.loads(json.dumps(ES_DOC))


@pytest.fixture
def store(en_doc, es_doc) -> ResourceStore:
    return make_store(en=en_doc, es=es_doc)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def controller_factory(sink) -> Callable[..., Controller]:
    """Build a Controller over a DictSource."""

    def _build(
        documents: dict[str, Any],
        languages: Optional[list[str]] = None,
        base_language: str = "en",
        enforce_instruction_keys: bool = False,
    ) -> Controller:
        source = DictSource(documents)
        return Controller(
            loader=Loader(source, enforce_instruction_keys=enforce_instruction_keys),
            languages=languages if languages is not None else list(documents),
            base_language=base_language,
            renderer=Renderer(STATIC_KEYS),
            sinks=[sink],
        )

    return _build
