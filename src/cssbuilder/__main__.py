#!/usr/bin/env python3
"""Command-line interface for cssbuilder."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Any, NoReturn

from .logs import configure_logging
from .parts import PartKind, SelectorPart
from .selector import BuilderOpts, CompoundSelector, Selector, SelectorBuildError, SelectorBuilder

_COMBINATOR = "combinator"

Step = tuple[Any, str]


class _AppendStep(argparse.Action):
    """Record every part and combinator option in command-line order."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        steps = list(getattr(namespace, self.dest, None) or [])
        steps.append((self.const, values))
        setattr(namespace, self.dest, steps)


def _get_version() -> str:
    try:
        return version("cssbuilder")
    except PackageNotFoundError:  # pragma: no cover
        return "dev"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from its parts, checking CSS part order.",
        epilog=(
            "Examples:\n"
            "  cssbuilder --id main --class container --class editable\n"
            "  cssbuilder -e a -a 'href$=\".png\"' -p focus\n"
            "  cssbuilder -e div -i main -C + -e table -i data\n"
            "\n"
            "If you don't have the 'cssbuilder' command available, use:\n"
            "  python -m cssbuilder ...\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    part_options = [
        ("-e", "--element", PartKind.ELEMENT, "Type selector, e.g. div"),
        ("-i", "--id", PartKind.ID, "ID selector, without the leading #"),
        ("-c", "--class", PartKind.CLASS, "Class selector, without the leading ."),
        ("-a", "--attribute", PartKind.ATTRIBUTE, "Attribute expression, without the brackets"),
        ("-p", "--pseudo-class", PartKind.PSEUDO_CLASS, "Pseudo-class, without the leading :"),
        ("-P", "--pseudo-element", PartKind.PSEUDO_ELEMENT, "Pseudo-element, without the leading ::"),
    ]
    for short, long, kind, help_text in part_options:
        parser.add_argument(short, long, dest="steps", action=_AppendStep, const=kind, metavar="VALUE", help=help_text)

    parser.add_argument(
        "-C",
        "--combinator",
        dest="steps",
        action=_AppendStep,
        const=_COMBINATOR,
        metavar="TOKEN",
        help="Close the current compound selector and join the next one with TOKEN (' ', '>', '~' or '+')",
    )
    parser.add_argument(
        "--no-validate-combinator",
        action="store_false",
        dest="validate_combinator",
        help="Embed any combinator token verbatim instead of rejecting unknown ones",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug events to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cssbuilder {_get_version()}",
    )

    args = parser.parse_args(argv)

    if not args.steps:
        parser.print_help(sys.stderr)
        raise SystemExit(1)

    kinds = [kind for kind, _ in args.steps]
    if kinds[0] == _COMBINATOR or kinds[-1] == _COMBINATOR:
        parser.error("a combinator must sit between two compound selectors")
    if any(a == _COMBINATOR and b == _COMBINATOR for a, b in zip(kinds, kinds[1:])):
        parser.error("a combinator must sit between two compound selectors")

    return args


def _build(steps: list[Step], builder: SelectorBuilder) -> Selector:
    compounds: list[list[SelectorPart]] = [[]]
    combinators: list[str] = []
    for kind, value in steps:
        if kind == _COMBINATOR:
            combinators.append(value)
            compounds.append([])
        else:
            compounds[-1].append(SelectorPart(kind, value))

    selector: Selector = CompoundSelector.from_parts(compounds[0])
    for combinator, parts in zip(combinators, compounds[1:]):
        selector = builder.combine(selector, combinator, CompoundSelector.from_parts(parts))
    return selector


def main() -> NoReturn | None:
    args = _parse_args(sys.argv[1:])
    configure_logging(verbose=args.verbose)
    builder = SelectorBuilder(BuilderOpts(validate_combinator=args.validate_combinator))

    try:
        selector = _build(args.steps, builder)
    except SelectorBuildError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2) from e

    sys.stdout.write(selector.stringify())
    sys.stdout.write("\n")
    return None


if __name__ == "__main__":
    main()
