"""Run the browser perk chart with a fresh exported state snapshot."""

from __future__ import annotations

import argparse

from perk_chart.models.constants import DEFAULT_MAX_LEVEL_EXCLUSIVE
from perk_chart.webui.server import serve


def main() -> None:
    parser = argparse.ArgumentParser(description="Run web UI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=4173)
    parser.add_argument("--no-open", action="store_true", help="Do not open a browser tab")
    parser.add_argument(
        "--max-level",
        type=int,
        default=DEFAULT_MAX_LEVEL_EXCLUSIVE,
        help="Chart levels 0..N-1 (default: %(default)s)",
    )
    args = parser.parse_args()
    if args.max_level < 0:
        parser.error("--max-level must be >= 0")

    serve(
        host=args.host,
        port=args.port,
        open_browser=not args.no_open,
        max_level_exclusive=args.max_level,
    )


if __name__ == "__main__":
    main()
