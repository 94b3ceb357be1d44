"""Command-line entrypoint driving the widget end to end."""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from icon_finder.config import get_settings
from icon_finder.logging import configure_logging, logger
from icon_finder.ui.results import PanelKind
from icon_finder.ui.widget import IconFinderWidget


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the icon catalog and copy SVG markup.")
    parser.add_argument("query", help="Search term")
    parser.add_argument(
        "--copy",
        type=int,
        metavar="N",
        help="Copy the N-th result (1-based) to the clipboard",
    )
    return parser.parse_args(argv)


async def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    async with IconFinderWidget(settings) as widget:
        controller = widget.controller
        controller.on_input(args.query)
        await controller.on_enter()

        renderer = widget.renderer
        print(renderer.count_label)
        if renderer.panel is PanelKind.ERROR:
            print(f"{renderer.error.title}: {renderer.error.message}")
            return 1
        for index, tile in enumerate(renderer.tiles, start=1):
            print(f"{index:>4}  {tile.icon.name}  [{tile.icon.hash}]")

        if args.copy:
            if not 1 <= args.copy <= len(renderer.tiles):
                logger.error("copy_index_out_of_range", index=args.copy, available=len(renderer.tiles))
                return 2
            await renderer.activate(renderer.tiles[args.copy - 1].icon.hash)
            toast = widget.notifier.current
            if toast is not None:
                print(toast.message)
                return 0 if toast.kind == "success" else 1
    return 0


def run() -> int:
    return asyncio.run(main())


if __name__ == "__main__":
    raise SystemExit(run())
