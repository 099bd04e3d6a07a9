"""
Controller — owns the session state and handles the page's triggers.

State:
    uninitialized ──start()──▶ initialized(active_language)
    initialized ──on_language_change(lang)──▶ initialized(lang)

The active language is written only here. Renderer and SelectionCompiler are
called with explicit arguments and never see the controller.
"""

from typing import Iterable, Optional, Protocol, Sequence

import structlog

from lingosheet.compiler import SelectionCompiler
from lingosheet.config import Settings, settings
from lingosheet.exceptions import BaseLanguageUnavailable, EngineNotReady
from lingosheet.loader import Loader
from lingosheet.renderer import Renderer
from lingosheet.schemas import OutputList, RenderedState
from lingosheet.sources import FileBundleSource, HttpBundleSource
from lingosheet.store import ResourceStore

logger = structlog.get_logger(__name__)


class RenderSink(Protocol):
    """Presentation-layer consumer of engine output."""

    def paint_state(self, state: RenderedState) -> None:
        ...

    def paint_output(self, output: Optional[OutputList]) -> None:
        ...

    def alert(self, message: str) -> None:
        ...


class Controller:
    """Wires language-change and generate triggers to the engine."""

    def __init__(
        self,
        loader: Loader,
        languages: Sequence[str],
        base_language: str,
        renderer: Optional[Renderer] = None,
        compiler: Optional[SelectionCompiler] = None,
        sinks: Iterable[RenderSink] = (),
    ):
        self.loader = loader
        self.languages = list(languages)
        self.base_language = base_language
        self.renderer = renderer or Renderer()
        self.compiler = compiler or SelectionCompiler()
        self.sinks = list(sinks)

        self._store: Optional[ResourceStore] = None
        self._fatal: Optional[BaseLanguageUnavailable] = None
        self._active_language: Optional[str] = None
        self._state: Optional[RenderedState] = None
        self._selection: set[str] = set()
        self._output: Optional[OutputList] = None

    # ── Read-only views ───────────────────────────────────────────────

    @property
    def ready(self) -> bool:
        return self._active_language is not None

    @property
    def active_language(self) -> Optional[str]:
        return self._active_language

    @property
    def store(self) -> Optional[ResourceStore]:
        return self._store

    @property
    def state(self) -> Optional[RenderedState]:
        return self._state

    @property
    def output(self) -> Optional[OutputList]:
        return self._output

    @property
    def selection(self) -> frozenset[str]:
        return frozenset(self._selection)

    @property
    def available_languages(self) -> list[str]:
        return self._store.languages if self._store is not None else []

    # ── Initialization ────────────────────────────────────────────────

    async def start(self) -> RenderedState:
        """
        Load all bundles, activate the base language, and paint the first pass.

        Raises:
            BaseLanguageUnavailable: reported to the sinks once, then re-raised
        """
        if self._fatal is not None:
            raise self._fatal
        if self._state is not None:
            return self._state

        try:
            store = await self.loader.load_all(self.languages, self.base_language)
        except BaseLanguageUnavailable as e:
            self._fatal = e
            for sink in self.sinks:
                sink.alert(e.message)
            raise

        self._store = store
        self._activate(self.base_language)
        logger.info("engine_initialized", language=self.base_language, languages=store.languages)
        return self._state

    # ── Triggers ──────────────────────────────────────────────────────

    def on_language_change(self, new_lang: str) -> RenderedState:
        """
        Switch the active language.

        Raises:
            LanguageNotLoaded: nothing changes
        """
        self.require_ready()
        previous = self._active_language
        self._activate(new_lang)
        logger.info("language_changed", previous=previous, language=new_lang)
        return self._state

    def toggle(self, key: str, checked: bool = True) -> frozenset[str]:
        """Check or uncheck one checklist item of the current render."""
        self.require_ready()
        if key not in self._state.instruction_keys:
            logger.debug("selection_key_not_in_checklist", key=key, language=self._active_language)
            return self.selection
        if checked:
            self._selection.add(key)
        else:
            self._selection.discard(key)
        return self.selection

    def set_selection(self, keys: Iterable[str]) -> frozenset[str]:
        """Replace the whole selection; keys outside the checklist are ignored."""
        self.require_ready()
        shown = set(self._state.instruction_keys)
        self._selection = {key for key in keys if key in shown}
        return self.selection

    def on_generate(self, selection: Optional[Iterable[str]] = None) -> OutputList:
        """
        Compile the selection for the active language.

        ``selection`` is the checklist snapshot carried by the generate event;
        without one the tracked selection is used.
        """
        self.require_ready()
        bundle = self._store.bundle(self._active_language)
        selected = set(selection) if selection is not None else set(self._selection)

        output = self.compiler.compile(selected, bundle)
        self._output = output
        for sink in self.sinks:
            sink.paint_output(output)
        logger.debug(
            "output_generated",
            language=self._active_language,
            entries=len(output.entries),
            empty_state=output.empty_state,
        )
        return output

    # ── Internals ─────────────────────────────────────────────────────

    def require_ready(self) -> None:
        if not self.ready:
            raise EngineNotReady()

    def _activate(self, lang: str) -> None:
        # Render first: LanguageNotLoaded must leave every field untouched.
        previous = self._state.texts if self._state is not None else None
        state = self.renderer.render(self._store, lang, previous)

        self._active_language = lang
        self._state = state
        self._selection.clear()
        self._output = None
        for sink in self.sinks:
            sink.paint_state(state)
            sink.paint_output(None)


def create_controller(config: Optional[Settings] = None, sinks: Iterable[RenderSink] = ()) -> Controller:
    """Build a Controller wired from settings (HTTP source when a base URL is set)."""
    config = config or settings
    if config.uses_http_source:
        source = HttpBundleSource(config.resource_base_url, timeout=config.fetch_timeout_seconds)
    else:
        source = FileBundleSource(config.locales_dir)

    return Controller(
        loader=Loader(source, enforce_instruction_keys=config.enforce_instruction_keys),
        languages=config.languages,
        base_language=config.base_language,
        renderer=Renderer(config.static_text_keys),
        sinks=sinks,
    )
