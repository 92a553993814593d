# Usage: python -m deprecate_parameters show package.module:function

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any

import yaml


class CommandLineInspector:
    @classmethod
    def run(cls, *, target: str) -> str:
        obj: Any = cls._import_target(target)

        registry = getattr(obj, "__deprecated_parameters__", None)
        if not registry:
            raise ValueError(f"'{target}' does not declare any deprecated parameter.")

        return yaml.safe_dump(
            {target: dict(registry)}, sort_keys=False, default_flow_style=False
        )

    @classmethod
    def _import_target(cls, target: str, /) -> Any:
        module_name, sep, qualname = target.partition(":")
        if not sep or not module_name or not qualname:
            raise ValueError(
                f"Expected a target of the form 'package.module:qualname', got '{target}'."
            )

        try:
            obj: Any = importlib.import_module(module_name)
        except ImportError as e:
            raise ValueError(f"Could not import module '{module_name}': {e}") from e

        for attr in qualname.split("."):
            try:
                obj = getattr(obj, attr)
            except AttributeError:
                raise ValueError(
                    f"Could not find '{qualname}' in module '{module_name}'."
                )
        return obj


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m deprecate_parameters",
        description="Inspect the deprecated parameters of a callable.",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print debug logging messages."
    )

    subparsers = parser.add_subparsers(dest="command")
    show_parser = subparsers.add_parser(
        "show", help="Print the deprecated parameters of a callable as YAML."
    )
    show_parser.add_argument(
        "target",
        type=str,
        help="Callable to inspect, as 'package.module:qualname'.",
    )

    args: argparse.Namespace = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    if args.command == "show":
        try:
            output = CommandLineInspector.run(target=args.target)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(output, end="")
        return 0
    else:
        parser.print_usage(sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
