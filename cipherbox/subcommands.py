"""A command with two subcommands, each with its own flags."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from cipherbox.flags import _Flag, _FlagError, _FlagSet, _go_list, _HelpRequested

_EXPECTED = "expected 'foo' or 'bar' subcommands"


def _foo_flags() -> _FlagSet:
    return _FlagSet("foo", [_Flag("enable", bool, False, "enable"), _Flag("name", str, "", "name")])


def _bar_flags() -> _FlagSet:
    return _FlagSet("bar", [_Flag("level", int, 0, "level")])


_COMMANDS = {"foo": _foo_flags, "bar": _bar_flags}


@dataclass
class FooOptions:
    """Options of the ``foo`` subcommand."""

    enable: bool = False
    name: str = ""
    tail: list[str] = field(default_factory=list)


@dataclass
class BarOptions:
    """Options of the ``bar`` subcommand."""

    level: int = 0
    tail: list[str] = field(default_factory=list)


def parse_subcommand(argv: Sequence[str]) -> FooOptions | BarOptions:
    """Parse a subcommand name followed by its flags."""
    if not argv or argv[0] not in _COMMANDS:
        raise ValueError(_EXPECTED)
    command, *rest = argv
    values, tail = _COMMANDS[command]().parse(rest)
    if command == "foo":
        return FooOptions(enable=bool(values["enable"]), name=str(values["name"]), tail=tail)
    return BarOptions(level=int(values["level"]), tail=tail)  # type: ignore[arg-type]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the subcommand named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in _COMMANDS:
        print(_EXPECTED)
        return 1

    flag_set = _COMMANDS[args[0]]()
    try:
        options = parse_subcommand(args)
    except _HelpRequested:
        print(flag_set.usage(), file=sys.stderr)
        return 0
    except _FlagError as exc:
        print(exc, file=sys.stderr)
        print(flag_set.usage(), file=sys.stderr)
        return 2

    if isinstance(options, FooOptions):
        print("subcommand 'foo'")
        print("  enable:", "true" if options.enable else "false")
        print("  name:", options.name)
    else:
        print("subcommand 'bar'")
        print("  level:", options.level)
    print("  tail:", _go_list(options.tail))
    return 0


if __name__ == "__main__":
    sys.exit(main())