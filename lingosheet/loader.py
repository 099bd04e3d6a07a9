"""
Loader — fetch every configured language bundle once at startup.

Strategy:
1. Fan out one fetch per configured code (asyncio.gather); fetches are independent
2. Apply each outcome to the store in configured order, once all have settled
3. A non-base failure makes that language unselectable (LanguageUnavailable)
4. A base failure is fatal (BaseLanguageUnavailable); no first render fires

The Loader is the only writer of a ResourceStore; the store is sealed on return.
"""

import asyncio
import json
from typing import Iterable, Optional

import structlog

from lingosheet.exceptions import BaseLanguageUnavailable, LanguageUnavailable
from lingosheet.schemas import LoadReport, TranslationBundle
from lingosheet.sources import BundleSource
from lingosheet.store import ResourceStore

logger = structlog.get_logger(__name__)

def ordered_codes(language_codes: Iterable[str], base_language: str) -> list[str]:
    """
    Deduplicate codes keeping first occurrences.

    The base language is always attempted; if it is not configured it is
    loaded first.
    """
    codes: list[str] = []
    for code in language_codes:
        if code and code not in codes:
            codes.append(code)
    if base_language not in codes:
        codes.insert(0, base_language)
    return codes


class Loader:
    """Populates a ResourceStore from a BundleSource."""

    def __init__(self, source: BundleSource, enforce_instruction_keys: bool = False):
        self.source = source
        self.enforce_instruction_keys = enforce_instruction_keys
        self.failures: dict[str, LanguageUnavailable] = {}
        self.report: Optional[LoadReport] = None

    async def load_all(
        self,
        language_codes: Iterable[str],
        base_language: str,
    ) -> ResourceStore:
        """
        Load every bundle and return the sealed store.

        Raises:
            BaseLanguageUnavailable: the base bundle failed to fetch or parse
        """
        codes = ordered_codes(language_codes, base_language)
        logger.info("bundles_loading", languages=codes, base_language=base_language)

        outcomes = await asyncio.gather(*(self._load_one(code) for code in codes))
        results = dict(zip(codes, outcomes))

        base = results[base_language]
        base_keys = set(base.instructions) if isinstance(base, TranslationBundle) else None

        store = ResourceStore()
        report = LoadReport(base_language=base_language)
        self.failures = {}

        for code in codes:
            outcome = results[code]
            if isinstance(outcome, TranslationBundle) and base_keys is not None and code != base_language:
                outcome = self._check_instruction_keys(outcome, base_keys)

            if isinstance(outcome, LanguageUnavailable):
                self.failures[code] = outcome
                report.failed[code] = outcome.reason
                continue

            store.add(outcome)
            report.loaded.append(code)

        store.seal()
        self.report = report

        if base_language not in store:
            reason = self.failures[base_language].reason
            logger.error(
                "base_language_unavailable",
                language=base_language,
                reason=reason,
            )
            raise BaseLanguageUnavailable(base_language, reason)

        logger.info(
            "bundles_loaded",
            loaded=report.loaded,
            failed=sorted(report.failed),
        )
        return store

    async def _load_one(self, code: str) -> TranslationBundle | LanguageUnavailable:
        """Fetch and parse one bundle. Failures are returned, not raised."""
        try:
            raw = await self.source.fetch(code)
            document = json.loads(raw)
            return TranslationBundle.from_document(code, document)
        except Exception as e:
            logger.warning(
                "bundle_load_failed",
                language=code,
                error=str(e),
                error_type=type(e).__name__,
            )
            return LanguageUnavailable(code, str(e) or type(e).__name__)

    def _check_instruction_keys(
        self,
        bundle: TranslationBundle,
        base_keys: set[str],
    ) -> TranslationBundle | LanguageUnavailable:
        keys = set(bundle.instructions)
        if keys == base_keys:
            return bundle

        missing = sorted(base_keys - keys)
        extra = sorted(keys - base_keys)
        if self.enforce_instruction_keys:
            logger.warning(
                "bundle_rejected_instruction_keys",
                language=bundle.language,
                missing=missing,
                extra=extra,
            )
            return LanguageUnavailable(
                bundle.language,
                "instruction keys differ from the base language",
            )

        logger.warning(
            "instruction_keys_mismatch",
            language=bundle.language,
            missing=missing,
            extra=extra,
        )
        return bundle
