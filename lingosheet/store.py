"""
Resource Store — loaded translation bundles keyed by language code.

Written once by the Loader, then sealed; read-only for the rest of the session.
"""

from typing import Iterator, Optional

import structlog

from lingosheet.exceptions import LanguageNotLoaded
from lingosheet.schemas import TranslationBundle

logger = structlog.get_logger(__name__)


class ResourceStore:
    """In-memory translation cache: language code → bundle."""

    def __init__(self):
        self._bundles: dict[str, TranslationBundle] = {}
        self._sealed = False

    # ── Writes (Loader only) ──────────────────────────────────────────

    def add(self, bundle: TranslationBundle) -> None:
        """Insert a bundle. The first bundle for a language wins."""
        if self._sealed:
            raise RuntimeError("ResourceStore is sealed; bundles are loaded once per session")
        if bundle.language in self._bundles:
            logger.debug("bundle_already_loaded", language=bundle.language)
            return
        self._bundles[bundle.language] = bundle

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ── Reads ─────────────────────────────────────────────────────────

    def __contains__(self, language: object) -> bool:
        return language in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._bundles)

    @property
    def languages(self) -> list[str]:
        """Loaded language codes, in load order."""
        return list(self._bundles)

    def get(self, language: str) -> Optional[TranslationBundle]:
        return self._bundles.get(language)

    def bundle(self, language: str) -> TranslationBundle:
        """Return the bundle for ``language`` or raise LanguageNotLoaded."""
        bundle = self._bundles.get(language)
        if bundle is None:
            raise LanguageNotLoaded(language)
        return bundle

    def lookup(self, language: str, path: str) -> Optional[str]:
        """Resolve a dotted key in one language. Misses return None."""
        bundle = self._bundles.get(language)
        if bundle is None:
            return None
        return bundle.resolve(path)
