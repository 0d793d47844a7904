"""Command-line flags with single- or double-dash options that stop at the first argument."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

_BOOL_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_BOOL_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_ZERO: dict[type, object] = {bool: False, int: 0, str: ""}
_TYPE_NAMES: dict[type, str] = {int: "int", str: "string"}


class _FlagError(ValueError):
    """A command line that the flag set cannot accept."""


class _HelpRequested(_FlagError):
    """The command line asked for the usage text."""


@dataclass(frozen=True)
class _Flag:
    name: str
    kind: type
    default: object
    usage: str


def _parse_bool(text: str) -> bool:
    if text in _BOOL_TRUE:
        return True
    if text in _BOOL_FALSE:
        return False
    raise ValueError(text)


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        # A leading zero means octal, as in "010".
        if re.fullmatch(r"[+-]?0[0-7]+", text):
            return int(text, 8)
        raise


def _format_default(flag: _Flag) -> str:
    if flag.kind is str:
        return f'"{flag.default}"'
    if flag.kind is bool:
        return "true" if flag.default else "false"
    return str(flag.default)


def _go_list(items: Iterable[object]) -> str:
    return "[" + " ".join(str(item) for item in items) + "]"


class _FlagSet:
    """A named set of typed flags."""

    def __init__(self, name: str, flags: Iterable[_Flag]) -> None:
        self.name = name
        self._flags = {flag.name: flag for flag in flags}

    def parse(self, argv: Sequence[str]) -> tuple[dict[str, object], list[str]]:
        """Return the flag values and the arguments left after the flags."""
        values: dict[str, object] = {name: flag.default for name, flag in self._flags.items()}
        args = list(argv)
        while args:
            arg = args[0]
            if len(arg) < 2 or arg[0] != "-":
                break
            if arg == "--":
                args.pop(0)
                break
            args.pop(0)
            minuses = 2 if arg[1] == "-" else 1
            body = arg[minuses:]
            if not body or body[0] in "-=":
                raise _FlagError(f"bad flag syntax: {arg}")
            name, sep, value = body.partition("=")
            has_value = bool(sep)

            flag = self._flags.get(name)
            if flag is None:
                if name in ("help", "h"):
                    raise _HelpRequested("flag: help requested")
                raise _FlagError(f"flag provided but not defined: -{name}")

            if flag.kind is bool:
                if has_value:
                    try:
                        values[name] = _parse_bool(value)
                    except ValueError:
                        raise _FlagError(
                            f'invalid boolean value "{value}" for -{name}: parse error'
                        ) from None
                else:
                    values[name] = True
                continue

            if not has_value:
                if not args:
                    raise _FlagError(f"flag needs an argument: -{name}")
                value = args.pop(0)
            try:
                values[name] = _parse_int(value) if flag.kind is int else value
            except ValueError:
                raise _FlagError(
                    f'invalid value "{value}" for flag -{name}: parse error'
                ) from None
        return values, args

    def usage(self) -> str:
        """Return the usage text listing every flag in name order."""
        lines = [f"Usage of {self.name}:"]
        for flag in sorted(self._flags.values(), key=lambda f: f.name):
            head = f"  -{flag.name}"
            type_name = _TYPE_NAMES.get(flag.kind)
            if type_name:
                head += f" {type_name}"
            text = head + ("\t" if len(head) <= 4 else "\n    \t") + flag.usage
            if flag.default != _ZERO[flag.kind] or type(flag.default) is not type(_ZERO[flag.kind]):
                text += f" (default {_format_default(flag)})"
            lines.append(text)
        return "\n".join(lines)


def _command_line_flags(name: str) -> _FlagSet:
    return _FlagSet(
        name,
        [
            _Flag("word", str, "foo", "a string"),
            _Flag("numb", int, 42, "an int"),
            _Flag("fork", bool, False, "a bool"),
            _Flag("svar", str, "bar", "a string var"),
        ],
    )


@dataclass
class FlagOptions:
    """Values of the command-line flags and the positional arguments after them."""

    word: str = "foo"
    numb: int = 42
    fork: bool = False
    svar: str = "bar"
    tail: list[str] = field(default_factory=list)


def parse_flags(argv: Sequence[str]) -> FlagOptions:
    """Parse ``argv`` (without the program name) into :class:`FlagOptions`."""
    values, tail = _command_line_flags("flag").parse(argv)
    return FlagOptions(
        word=str(values["word"]),
        numb=int(values["numb"]),  # type: ignore[arg-type]
        fork=bool(values["fork"]),
        svar=str(values["svar"]),
        tail=tail,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Show the raw arguments, then the parsed flags."""
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "flag"
    args = list(sys.argv[1:] if argv is None else argv)
    print("os.Args = ", _go_list([prog, *args]))
    print("os.Args[1:] = ", _go_list(args))
    print("Length os.Args = ", len(args) + 1)

    try:
        options = parse_flags(args)
    except _HelpRequested:
        print(_command_line_flags(prog).usage(), file=sys.stderr)
        return 0
    except _FlagError as exc:
        print(exc, file=sys.stderr)
        print(_command_line_flags(prog).usage(), file=sys.stderr)
        return 2

    print("word:", options.word)
    print("numb:", options.numb)
    print("fork:", "true" if options.fork else "false")
    print("svar:", options.svar)
    print("tail:", _go_list(options.tail))
    return 0


if __name__ == "__main__":
    sys.exit(main())