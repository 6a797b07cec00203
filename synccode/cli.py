from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from .config import SyncCodeSettings, load_registry
from .errors import SyncCodeError
from .validator import SyncCodeValidator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="synccode",
        description="Validate and build HBX device sync codes",
        epilog="The device registry defaults to SYNCCODE_REGISTRY when set, "
               "otherwise the built-in HBX device types are used.",
    )
    parser.add_argument(
        "--registry",
        type=str,
        default=None,
        help="Path to a device registry JSON file (overrides SYNCCODE_REGISTRY)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("devices", help="List allowed device types")
    for name, help_text in (
        ("split", "Split a code into prefix and identifier"),
        ("validate", "Print the canonical form of a code"),
        ("check", "Report whether a code is valid (exit status 1 if not)"),
        ("parse", "Print the fields of a code as JSON"),
        ("hyphenate", "Insert the missing hyphen into an eight character code"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("code", help="Device sync code, e.g. ABTU-1234")

    make = commands.add_parser("make", help="Build a code from its parts")
    make.add_argument("series", help="Single series letter")
    make.add_argument("device", help="Three letter device type")
    make.add_argument("identifier", help="Four digit identifier")
    return parser


def _run(validator: SyncCodeValidator, args: argparse.Namespace) -> int:
    command = args.command
    if command == "devices":
        for token in validator.get_allowed_devices():
            description = validator.get_device_description(token) or ""
            model = validator.get_device_model(token) or ""
            print(f"{token}\t{description}\t{model}".rstrip())
        return 0
    if command == "split":
        prefix, identifier = validator.split(args.code)
        print(f"{prefix} {identifier}")
        return 0
    if command == "validate":
        print(validator.validate(args.code))
        return 0
    if command == "check":
        valid = validator.is_valid(args.code)
        print("valid" if valid else "invalid")
        return 0 if valid else 1
    if command == "parse":
        parsed = validator.parse(args.code)
        payload = asdict(parsed)
        payload["canonical"] = parsed.canonical
        payload["number"] = parsed.number
        print(json.dumps(payload, indent=2))
        return 0
    if command == "hyphenate":
        print(validator.hyphenate(args.code))
        return 0
    if command == "make":
        print(
            validator.make(
                {
                    "series": args.series,
                    "device": args.device,
                    "identifier": args.identifier,
                }
            )
        )
        return 0
    raise ValueError(f"Unsupported command '{command}'")


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    settings = SyncCodeSettings.from_env()

    if not logging.getLogger().handlers:
        level = logging.DEBUG if args.verbose else settings.level_number
        logging.basicConfig(
            level=level,
            format="%(levelname)s [%(name)s] %(message)s",
        )

    registry_path = Path(args.registry) if args.registry else settings.registry_path
    validator = SyncCodeValidator(load_registry(registry_path))

    try:
        return _run(validator, args)
    except SyncCodeError as exc:
        logger.error("%s", exc)
        return 1


__all__ = ["build_parser", "main"]
