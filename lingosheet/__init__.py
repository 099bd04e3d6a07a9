"""
Lingosheet — translated instruction checklist and sheet generator.

Architecture:
    lingosheet/
    ├── config.py        # Pydantic settings (languages, sources, logging)
    ├── schemas.py       # Bundles, rendered state, output lists
    ├── store.py         # ResourceStore: language code → bundle, sealed after load
    ├── sources.py       # Bundle transports (HTTP via httpx, local files)
    ├── loader.py        # Concurrent bundle loading, partial-failure policy
    ├── renderer.py      # Static text + checklist for one language
    ├── compiler.py      # Selection → ordered output list
    ├── controller.py    # Active language, selection, trigger handlers
    ├── api/             # FastAPI routers (HTTP layer)
    └── cli.py           # Command-line sheet generator

Data Flow:
    Loader → ResourceStore → Renderer (on load, on every language change)
    → SelectionCompiler (on generate)

Version: 1.0.0
"""

__version__ = "1.0.0"
