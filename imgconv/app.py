from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from imgconv.controllers.cli_controller import CliController
from imgconv.errors import ImageConverterError
from imgconv.logging_config import build_logger, log_level_names, resolve_log_level
from imgconv.models.image_format import supported_format_names
from imgconv.services.convert_service import ConvertService
from imgconv.services.image_service import ImageService
from imgconv.services.inspect_service import InspectService
from imgconv.services.path_service import PathService

__version__ = "0.1.0"

PROG = "imgconv"


def build_parser() -> argparse.ArgumentParser:
    formats = ", ".join(supported_format_names())
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Convert images between formats, or report and check an image's format.",
        epilog=f"Formats: {formats} (jpg, tif, exr and ff are accepted as aliases).",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("path", help="Path of the file or directory to operate on")
    parser.add_argument("-t", "--target-format", default=None, help="Format to convert to when no command is given (same as the convert command)")
    parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help=f"Log level for logging to the console: {'|'.join(log_level_names())}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="{convert,is,info}")

    convert = subparsers.add_parser("convert", help="Convert a file, or every image under a directory")
    convert.add_argument("-t", "--target-format", required=True, help="Format to convert to")

    is_cmd = subparsers.add_parser("is", help="Exit successfully only if the file has the given format")
    is_cmd.add_argument("-f", "--format", dest="expected_format", required=True, help="Expected format")

    subparsers.add_parser("info", help="Print '<path> <format>' (the default command)")
    return parser


class ImageConverterApp:
    """Один запуск CLI: разбор аргументов, логгер, сервисы, контроллер."""

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        parser = build_parser()
        # argparse exits with 2 on usage errors
        args = parser.parse_args(argv)
        if args.command in ("is", "info") and args.target_format:
            parser.error(f"--target-format cannot be combined with the {args.command} command")

        try:
            level = resolve_log_level(args.log_level)
        except ImageConverterError as exc:
            self._eprint(str(exc))
            return 1
        logger = build_logger(level, self.stderr)

        image_service = ImageService(logger)
        path_service = PathService(logger)
        controller = CliController(
            path_service=path_service,
            convert_service=ConvertService(image_service, path_service, logger),
            inspect_service=InspectService(image_service, logger),
            logger=logger,
            stdout=self.stdout,
        )

        try:
            controller.dispatch(args)
        except ImageConverterError as exc:
            self._eprint(str(exc))
            return 1
        return 0

    def _eprint(self, msg: str) -> None:
        print(f"{PROG}: error: {msg}", file=self.stderr)
