import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any, TextIO

from netanon.anonymization.base import BaseAnonymizer
from netanon.anonymization.exceptions import AnonymizationError
from netanon.anonymization.factory import AnonymizerFactory
from netanon.config.settings import Settings
from netanon.logging.logger import Log

_COMMANDS = ("text", "data", "flow-logs", "topology")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netanon",
        description="Anonymize IPs, AWS account/resource IDs and IAM names in text or JSON.",
    )
    parser.add_argument("command", choices=_COMMANDS, help="kind of input to anonymize")
    parser.add_argument("-i", "--input", type=Path, help="input file (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    parser.add_argument(
        "--mappings-in",
        type=Path,
        help="import mappings before processing (ignored by 'data', which starts fresh)",
    )
    parser.add_argument("--mappings-out", type=Path, help="write mappings after processing")
    parser.add_argument(
        "--sequential",
        action="store_true",
        help="use numbered replacements (instance-001) instead of hashed ones",
    )
    parser.add_argument("--salt", help="hash salt for structure-preserving replacements")
    parser.add_argument("--include-usernames", action="store_true")
    parser.add_argument("--include-role-names", action="store_true")
    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.sequential:
        overrides["preserve_structure"] = False
    if args.salt:
        overrides["hash_salt"] = args.salt
    if args.include_usernames:
        overrides["anonymize_usernames"] = True
    if args.include_role_names:
        overrides["anonymize_role_names"] = True
    return overrides


def _read(path: Path | None, stdin: TextIO) -> str:
    if path is None:
        return stdin.read()
    return path.read_text(encoding="utf-8")


def run(anonymizer: BaseAnonymizer, command: str, raw: str) -> str:
    """Anonymize *raw* input for *command* and return the serialized output."""
    if command == "text":
        return anonymizer.anonymize_text(raw)

    payload = json.loads(raw)
    if command == "data":
        result: Any = anonymizer.anonymize_data(payload).anonymized
    elif command == "flow-logs":
        if not isinstance(payload, list):
            raise ValueError("flow-logs input must be a JSON array of records")
        result = anonymizer.anonymize_flow_logs(payload)
    else:
        result = anonymizer.anonymize_network_topology(payload)
    return json.dumps(result, indent=2, default=str) + "\n"


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Entry point: settings -> engine -> read -> anonymize -> write."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        anonymizer = AnonymizerFactory.create(settings, **_overrides(args))
        if args.mappings_in is not None:
            anonymizer.import_mappings(args.mappings_in.read_text(encoding="utf-8"))

        output = run(anonymizer, args.command, _read(args.input, stdin or sys.stdin))

        if args.output is None:
            (stdout or sys.stdout).write(output)
        else:
            args.output.write_text(output, encoding="utf-8")
        if args.mappings_out is not None:
            args.mappings_out.write_text(anonymizer.export_mappings(), encoding="utf-8")
    except (AnonymizationError, OSError, ValueError) as exc:
        Log.error(f"{args.command} anonymization failed: {exc}")
        return 1

    Log.info(f"{args.command} anonymization complete", identifiers=len(anonymizer.get_mappings()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
