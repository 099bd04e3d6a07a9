"""
Selection Compiler — turn checked instruction keys into the output list.
"""

from typing import AbstractSet

import structlog

from lingosheet.schemas import OutputList, TranslationBundle

logger = structlog.get_logger(__name__)

EMPTY_SELECTION_TEXT = "No instructions selected."


def empty_selection() -> OutputList:
    """The single sentinel row for "generated with nothing picked"."""
    return OutputList(entries=[EMPTY_SELECTION_TEXT], empty_state=True)


class SelectionCompiler:
    """
    Compiles a selection against one bundle.

    Output order is the bundle's instruction order, never the order in which
    keys were checked.
    """

    def compile(
        self,
        selected: AbstractSet[str],
        bundle: TranslationBundle,
    ) -> OutputList:
        # ── 1. Nothing selected ───────────────────────────────────────
        if not selected:
            return empty_selection()

        # ── 2. Stale keys from a previous language's checklist ────────
        stale = [key for key in selected if key not in bundle.instructions]
        if stale:
            logger.debug(
                "stale_selection_dropped",
                language=bundle.language,
                keys=sorted(stale),
            )

        entries = [
            text
            for key, text in bundle.instructions.items()
            if key in selected
        ]

        # ── 3. Every selected key was stale ───────────────────────────
        if not entries:
            return empty_selection()

        return OutputList(entries=entries)
