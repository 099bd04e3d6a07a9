"""
Engine Schemas.

Defines translation bundles, rendered page state, and output lists.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


INSTRUCTIONS_SECTION = "instructions"


# ── Bundle ─────────────────────────────────────────────────────────────


class TranslationBundle(BaseModel):
    """
    One language's complete set of translated strings.

    ``instructions`` keeps the document's key order; that order is the
    checklist order.
    """
    model_config = ConfigDict(frozen=True)

    language: str
    instructions: dict[str, str]
    sections: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, language: str, document: Any) -> "TranslationBundle":
        """Build a bundle from a decoded JSON document. Raises ValueError."""
        if not isinstance(document, dict):
            raise ValueError("bundle root must be a JSON object")
        if INSTRUCTIONS_SECTION not in document:
            raise ValueError(f"bundle has no '{INSTRUCTIONS_SECTION}' section")
        sections = {k: v for k, v in document.items() if k != INSTRUCTIONS_SECTION}
        return cls(
            language=language,
            instructions=document[INSTRUCTIONS_SECTION],
            sections=sections,
        )

    def resolve(self, path: str) -> Optional[str]:
        """
        Resolve a dotted key path (e.g. "ui.title").

        Returns None when any segment is missing or the leaf is not a
        non-empty string.
        """
        if not path:
            return None
        head, _, rest = path.partition(".")
        if head == INSTRUCTIONS_SECTION:
            value: Any = self.instructions
        else:
            value = self.sections.get(head)
        for part in rest.split(".") if rest else []:
            if not isinstance(value, dict):
                return None
            value = value.get(part)
            if value is None:
                return None
        return value if isinstance(value, str) and value else None


# ── Rendering ──────────────────────────────────────────────────────────


class InstructionItem(BaseModel):
    """One selectable checklist row."""
    key: str
    text: str


class RenderedState(BaseModel):
    """Everything the page paints for one language."""
    lang: str
    texts: dict[str, str] = Field(default_factory=dict)
    items: list[InstructionItem] = Field(default_factory=list)

    @property
    def instruction_keys(self) -> list[str]:
        return [item.key for item in self.items]


class OutputList(BaseModel):
    """
    Result of a generate action.

    ``empty_state`` marks the single sentinel row shown when nothing was
    selected, as opposed to "never generated" (no OutputList at all).
    """
    entries: list[str]
    empty_state: bool = False


# ── Loading ────────────────────────────────────────────────────────────


class LoadReport(BaseModel):
    """Outcome of one ``Loader.load_all`` run."""
    base_language: str
    loaded: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)   # code → reason
