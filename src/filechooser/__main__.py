"""Entry point for the chooser demo: python -m filechooser"""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import replace
from pathlib import Path

from textual.logging import TextualHandler

from filechooser.app import FileChooserApp
from filechooser.config import ChooserOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filechooser",
        description="Browse the filesystem and pick a file or a directory.",
    )
    parser.add_argument("base_directory", nargs="?", type=Path,
                        help="directory to start in (default: current directory)")
    parser.add_argument("--only-dirs", action="store_true", default=None,
                        help="only directories can be chosen")
    parser.add_argument("--hide-hidden", action="store_true",
                        help="leave out entries whose name starts with a dot")
    parser.add_argument("--title", help="dialog title")
    parser.add_argument("--accept-title", help="label of the accept button")
    parser.add_argument("--cancel-title", help="label of the cancel button")
    parser.add_argument("--log-level",
                        default=os.environ.get("FILECHOOSER_LOG_LEVEL", "WARNING"),
                        help="logging level sent to the textual console")
    return parser


def options_from_args(args: argparse.Namespace) -> ChooserOptions:
    """Environment defaults, overridden by whatever was given on the command line."""
    options = ChooserOptions.from_env()
    changes = {
        "base_directory": args.base_directory,
        "only_directories": args.only_dirs,
        "title": args.title,
        "accept_title": args.accept_title,
        "cancel_title": args.cancel_title,
    }
    if args.hide_hidden:
        changes["show_hidden"] = False
    return replace(options, **{k: v for k, v in changes.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), handlers=[TextualHandler()])

    app = FileChooserApp(options_from_args(args))
    app.run()
    result = app.last_result
    if result is not None and result.accepted:
        print(result.path)


if __name__ == "__main__":
    main()
