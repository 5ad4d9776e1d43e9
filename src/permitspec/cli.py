"""CLI entry point for permitspec."""

from __future__ import annotations

import argparse
import json
import sys

from permitspec.behaviors import UnknownBehaviorError, helper_names, resolve
from permitspec.models import ResolvedBehavior


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="permitspec",
        description="permitspec — inspect RESTful helper methods",
    )
    subparsers = parser.add_subparsers(dest="command")

    # behaviors subcommand
    behaviors_parser = subparsers.add_parser(
        "behaviors", help="List every helper method and its actions"
    )
    behaviors_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    # resolve subcommand
    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve a helper method name"
    )
    resolve_parser.add_argument("name", help="Helper method, e.g. only_to_read")
    resolve_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "behaviors":
        _handle_behaviors(args)
    elif args.command == "resolve":
        _handle_resolve(args)


def _as_dict(helper: ResolvedBehavior) -> dict[str, object]:
    return {
        "name": helper.name,
        "prefix": helper.prefix.value,
        "behavior": helper.behavior,
        "actions": list(helper.actions),
        "negated_actions": list(helper.negated_actions),
    }


def _print_text(helper: ResolvedBehavior) -> None:
    actions = ", ".join(helper.actions) or "-"
    negated = ", ".join(helper.negated_actions) or "-"
    print(f"{helper.name:<17} actions: {actions}")
    print(f"{'':<17} negated: {negated}")


def _handle_behaviors(args: argparse.Namespace) -> None:
    helpers = [resolve(name) for name in helper_names()]

    if args.format == "json":
        print(json.dumps([_as_dict(h) for h in helpers], indent=2))
    else:
        for h in helpers:
            _print_text(h)


def _handle_resolve(args: argparse.Namespace) -> None:
    try:
        helper = resolve(args.name)
    except UnknownBehaviorError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.format == "json":
        print(json.dumps(_as_dict(helper), indent=2))
    else:
        _print_text(helper)


if __name__ == "__main__":
    main()
