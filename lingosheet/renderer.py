"""
Renderer — derive everything the page shows for one language.

Pure over its arguments: the store, the language, and the texts currently on
screen. It never touches the active language or any output list.
"""

from typing import Iterable, Mapping, Optional

import structlog

from lingosheet.schemas import InstructionItem, RenderedState
from lingosheet.store import ResourceStore

logger = structlog.get_logger(__name__)


class Renderer:
    """
    Builds a RenderedState from a loaded bundle.

    Static text:
    - Each placeholder identifier (e.g. "ui.title") is resolved as a dotted path
    - A miss keeps whatever is currently displayed for that placeholder, or the
      identifier itself when nothing has been displayed yet

    Checklist:
    - One item per key of the active bundle's ``instructions`` section, in
      document order; never a union across languages
    """

    def __init__(self, static_keys: Iterable[str] = ()):
        self.static_keys = list(dict.fromkeys(static_keys))

    def render(
        self,
        store: ResourceStore,
        lang: str,
        previous: Optional[Mapping[str, str]] = None,
    ) -> RenderedState:
        """
        Render ``lang``.

        Raises:
            LanguageNotLoaded: ``lang`` has no bundle in ``store``
        """
        bundle = store.bundle(lang)
        previous = previous or {}

        texts: dict[str, str] = {}
        misses: list[str] = []
        for key in self.static_keys:
            value = bundle.resolve(key)
            if value is None:
                misses.append(key)
                value = previous.get(key, key)
            texts[key] = value

        items = [
            InstructionItem(key=key, text=text)
            for key, text in bundle.instructions.items()
        ]

        if misses:
            logger.debug("static_text_unresolved", language=lang, keys=misses)
        logger.debug("rendered", language=lang, items=len(items), texts=len(texts))

        return RenderedState(lang=lang, texts=texts, items=items)
