# Path: captioner/cli.py
# Purpose: Command-line entry point for captioning a gallery of images.
# Layer: captioner.
# Details: Parses options into AppSettings, configures logging, and maps pipeline errors to exit codes.

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from config.settings import AppSettings, ViewerSettings
from captioner.errors import CaptionerError
from captioner.pipeline import CaptionPipeline

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _path_type(path_str: str) -> Path:
    return Path(path_str).expanduser().resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="caption-gallery", description="Edit captions for a gallery of images.")
    parser.add_argument(
        "gallery_dir",
        nargs="?",
        type=_path_type,
        default=None,
        help="Directory of the gallery to generate captions for (default: current directory)",
    )
    parser.add_argument("-t", "--output-type", default="csv", help='The type of output, available options: "csv"')
    parser.add_argument(
        "-n",
        "--output-name",
        default=None,
        help='Name of the caption file inside the gallery (default: "captions.<output-type>")',
    )
    parser.add_argument("-e", "--edit", action="store_true", help="Edit the captions interactively")
    parser.add_argument(
        "-c",
        "--view-command",
        default=None,
        help="Command launched to view the image whose caption is being edited",
    )
    parser.add_argument(
        "-a",
        "--view-command-args",
        nargs="+",
        default=None,
        help='Arguments for the view command; escape dashes with a backslash, e.g. -a "\\-\\-some" "value"',
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Verbosity of log output",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> AppSettings:
    return AppSettings(
        gallery_dir=args.gallery_dir or Path.cwd(),
        output_type=args.output_type,
        output_name=args.output_name,
        edit=args.edit,
        viewer=ViewerSettings(command=args.view_command, args=args.view_command_args or []),
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = settings_from_args(args)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.debug("Settings: %s", settings)

    try:
        CaptionPipeline(settings).run()
    except CaptionerError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
