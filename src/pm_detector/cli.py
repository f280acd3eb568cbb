"""Command line entrypoint.

Usage:
  pm-detector [--cwd DIR] [--prefer PM ...] [--check-executable]
              [--ignore-package-manager-field] [--config FILE] [--json]
              [--structure] [--verbose]

Prints the package manager governing DIR. Exits 1 when it cannot be
determined and 2 on configuration or project errors.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import ConfigError, load_settings
from .core import detect_package_structure, which_package_manager
from .errors import PackageManagerError
from .models.package_manager import PackageManager
from .report import build_report
from .summary import render_summary

EXIT_UNDETERMINED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pm-detector",
        description="Detect the JavaScript package manager governing a directory.",
    )
    parser.add_argument("--cwd", type=Path, default=Path("."))
    parser.add_argument(
        "--prefer",
        dest="preferred",
        action="append",
        choices=[pm.value for pm in PackageManager],
        help="preferred package manager when several are possible (repeatable, in order)",
    )
    parser.add_argument("--check-executable", action="store_true", default=None)
    parser.add_argument("--ignore-package-manager-field", action="store_true", default=None)
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--json", action="store_true", help="print a JSON report")
    parser.add_argument(
        "--structure", action="store_true", help="print the detected structure only"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        print(f"pm-detector: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.preferred:
        settings = replace(settings, preferred=tuple(PackageManager(pm) for pm in args.preferred))
    if args.check_executable:
        settings = replace(settings, check_executable=True)
    if args.ignore_package_manager_field:
        settings = replace(settings, ignore_package_manager_field=True)

    cwd = args.cwd.resolve()
    try:
        structure = detect_package_structure(cwd)
        if args.structure:
            print(json.dumps(structure.to_dict(), indent=2))
            return 0
        package_manager = which_package_manager(
            cwd,
            preferred=settings.preferred,
            check_executable=settings.check_executable,
            ignore_package_manager_field=settings.ignore_package_manager_field,
            version_check_timeout=settings.version_check_timeout,
        )
    except PackageManagerError as exc:
        print(f"pm-detector: {exc}", file=sys.stderr)
        return EXIT_ERROR

    report = build_report(structure, package_manager, cwd)
    if args.json:
        print(json.dumps(report, indent=2))
    elif args.verbose:
        print(render_summary(report), end="")
    elif package_manager is not None:
        print(package_manager.value)

    return 0 if package_manager is not None else EXIT_UNDETERMINED


if __name__ == "__main__":
    raise SystemExit(main())
