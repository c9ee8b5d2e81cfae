from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import Final, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .a1 import A1Notation, parse_a1_notation, render_a1_notation
from .codec import decode, decode_error, encode
from .errors import DecodingFailure, ParseError
from .models import UpdateValuesResponse, ValueRange

logger = logging.getLogger(__name__)

PayloadKind = Literal["value-range", "update-response", "error"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
_PAYLOAD_MODELS: Final[dict[str, type[BaseModel]]] = {
    "value-range": ValueRange,
    "update-response": UpdateValuesResponse,
}
_NOTATION_ADAPTER: TypeAdapter[A1Notation] = TypeAdapter(A1Notation)


class CliConfig(BaseModel):
    """Configuration for one CLI invocation."""

    command: Literal["parse", "render", "decode"]
    argument: str = Field(..., description="A1 text, notation JSON, or payload path.")
    kind: PayloadKind = Field(default="value-range", description="Payload type for decode.")
    log_level: LogLevel = Field(default="WARNING", description="Logging level.")
    log_file: Path | None = Field(default=None, description="Optional log file path.")


def main(argv: list[str] | None = None) -> int:
    """Run the ``gsheets-a1`` command.

    Args:
        argv: Optional CLI arguments for testing.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    config = _parse_args(argv)
    _configure_logging(config)
    try:
        print(run_command(config))
    except (ParseError, DecodingFailure, ValidationError) as exc:
        logger.error("%s failed: %s", config.command, exc)
        return 1
    except OSError as exc:
        logger.error("Cannot read %s: %s", config.argument, exc)
        return 1
    return 0


def run_command(config: CliConfig) -> str:
    """Execute one command and return its output text.

    Raises:
        ParseError: If ``parse`` receives malformed A1 text.
        DecodingFailure: If ``decode`` receives a payload of the wrong shape.
        ValidationError: If ``render`` receives an invalid notation object.
    """
    if config.command == "parse":
        notation = parse_a1_notation(config.argument)
        return json.dumps(notation.model_dump(mode="json"))
    if config.command == "render":
        notation = _NOTATION_ADAPTER.validate_json(config.argument)
        return render_a1_notation(notation)
    payload = _read_payload(config.argument)
    if config.kind == "error":
        return json.dumps(encode(decode_error(payload)))
    return json.dumps(encode(decode(_PAYLOAD_MODELS[config.kind], payload)))


def _read_payload(argument: str) -> str:
    if argument == "-":
        return sys.stdin.read()
    return Path(argument).read_text(encoding="utf-8")


def _parse_args(argv: list[str] | None) -> CliConfig:
    """Parse CLI arguments into a config.

    Args:
        argv: Optional CLI argument list.

    Returns:
        Parsed CLI configuration.
    """
    parser = argparse.ArgumentParser(description="A1 notation parser and codec.")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--log-file", type=Path, help="Optional log file path.")
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse A1 text into JSON.")
    parse_cmd.add_argument("argument", metavar="TEXT", help="A1 notation, e.g. Sheet1!A1:B2.")

    render_cmd = commands.add_parser("render", help="Render notation JSON as A1 text.")
    render_cmd.add_argument("argument", metavar="JSON", help="Output of the parse command.")

    decode_cmd = commands.add_parser("decode", help="Decode an API response payload.")
    decode_cmd.add_argument("argument", metavar="PATH", help="JSON file, or '-' for stdin.")
    decode_cmd.add_argument(
        "--kind",
        choices=["value-range", "update-response", "error"],
        default="value-range",
        help="Payload type (value-range/update-response/error).",
    )

    args = parser.parse_args(argv)
    return CliConfig(
        command=args.command,
        argument=args.argument,
        kind=getattr(args, "kind", "value-range"),
        log_level=args.log_level,
        log_file=args.log_file,
    )


def _configure_logging(config: CliConfig) -> None:
    """Configure logging for the CLI process.

    Args:
        config: CLI configuration.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=config.log_level,
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
