"""
Command-line sheet generator.

Usage:
    lingosheet                               # checklist in the base language
    lingosheet --lang es --select inst_1     # Spanish sheet with one step
    lingosheet --json --select inst_2 --select inst_1
"""

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence, TextIO

from lingosheet.config import Settings, settings
from lingosheet.controller import create_controller
from lingosheet.exceptions import LingosheetError
from lingosheet.logging_config import configure_logging
from lingosheet.schemas import OutputList, RenderedState


class ConsoleSink:
    """Prints rendered state, output lists, and alerts to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.stream = stream or sys.stdout
        self.err = err or sys.stderr
        self.last_state: Optional[RenderedState] = None
        self.echo_output = True

    def paint_state(self, state: RenderedState) -> None:
        self.last_state = state

    def paint_output(self, output: Optional[OutputList]) -> None:
        if output is None or not self.echo_output:
            return
        for entry in output.entries:
            print(f"  - {entry}", file=self.stream)

    def alert(self, message: str) -> None:
        print(message, file=self.err)

    def print_checklist(self, state: RenderedState, selected: frozenset[str]) -> None:
        title = state.texts.get("ui.title")
        if title:
            print(title, file=self.stream)
        heading = state.texts.get("ui.checklist_heading", "ui.checklist_heading")
        print(f"{heading} [{state.lang}]", file=self.stream)
        for item in state.items:
            mark = "x" if item.key in selected else " "
            print(f"  [{mark}] {item.key}: {item.text}", file=self.stream)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lingosheet",
        description="Generate a translated instruction sheet",
    )
    parser.add_argument("--lang", help="Language to switch to after loading")
    parser.add_argument(
        "--select",
        action="append",
        default=[],
        metavar="KEY",
        help="Instruction key to check (repeatable)",
    )
    parser.add_argument("--base-url", help="Fetch bundles over HTTP from this URL")
    parser.add_argument("--locales-dir", help="Read bundles from this directory")
    parser.add_argument(
        "--languages",
        help="Comma-separated language codes (default: configured list)",
    )
    parser.add_argument("--json", action="store_true", help="Print the output list as JSON")
    return parser


def _config_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    overrides: dict = {}
    if args.base_url:
        overrides["resource_base_url"] = args.base_url
    if args.locales_dir:
        overrides["locales_dir"] = args.locales_dir
    if args.languages:
        overrides["languages"] = [c.strip() for c in args.languages.split(",") if c.strip()]
    return base.model_copy(update=overrides)


async def run(args: argparse.Namespace, config: Settings, sink: ConsoleSink) -> int:
    sink.echo_output = not args.json
    controller = create_controller(config, sinks=[sink])
    try:
        await controller.start()
        if args.lang:
            controller.on_language_change(args.lang)
        for key in args.select:
            if key not in controller.toggle(key):
                print(
                    f"Unknown instruction key '{key}' for '{controller.active_language}', ignored.",
                    file=sink.err,
                )
    except LingosheetError as e:
        if controller.ready:
            print(e.message, file=sink.err)
        return 1

    if args.json:
        output = controller.on_generate()
        json.dump(output.model_dump(), sink.stream, ensure_ascii=False)
        print(file=sink.stream)
        return 0

    sink.print_checklist(controller.state, controller.selection)
    heading = controller.state.texts.get("ui.output_heading", "ui.output_heading")
    print(heading, file=sink.stream)
    controller.on_generate()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = _config_from_args(args, settings)
    configure_logging(config)
    return asyncio.run(run(args, config, ConsoleSink()))


if __name__ == "__main__":
    sys.exit(main())
