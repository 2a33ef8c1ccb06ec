"""Command-line argument parsing into a command, positional arguments and options.

A token starting with ``--`` names one long option, optionally with a value
after ``=``. A token starting with a single ``-`` names one short option per
character. The first other token is the command; the remaining ones are its
arguments. Naming the same option twice is an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence


class ArgumentError(ValueError):
    """Raised when the command line cannot be parsed."""


def _program_name(path: str) -> str:
    cut = max(path.rfind("/"), path.rfind("\\"))
    return path[cut + 1:]


@dataclass
class Args:
    """Parsed command line."""

    name: str = ""
    cmd: Optional[str] = None
    opts: dict[str, Optional[str]] = field(default_factory=dict)
    args: list[str] = field(default_factory=list)
    optc: int = 0

    @property
    def argc(self) -> int:
        """Number of arguments after the command."""
        return len(self.args)

    def has_opt(self, opt: str) -> bool:
        """Return True if the option ``opt`` was given."""
        return opt in self.opts

    def get_opt(self, opt: str) -> Optional[str]:
        """Return the value of ``opt`` (None for a flag); raise KeyError if absent."""
        return self.opts[opt]

    def remove_opt(self, opt: str) -> Optional[str]:
        """Remove ``opt`` and return its value; raise KeyError if absent."""
        value = self.opts.pop(opt)
        self.optc -= 1
        return value

    def has_opts(self, *opts: str) -> int:
        """Return how many of ``opts`` were given (0 if none)."""
        return sum(1 for opt in opts if opt in self.opts)

    def count_unknown_opts(self, *opts: str) -> int:
        """Return how many given options are not among ``opts`` (0 means all known)."""
        if not self.opts:
            return 0
        return len(self.opts) - self.has_opts(*opts)

    def is_valid(self, min_argc: int, max_argc: int, *opts: str) -> bool:
        """Check the argument count and that every option is one of ``opts``."""
        if not min_argc <= self.argc <= max_argc:
            return False
        return self.count_unknown_opts(*opts) == 0


def parse_args(
    argv: Sequence[str],
    to_text: Optional[Callable[[str], str]] = None,
) -> Args:
    """Parse ``argv`` (program path first) into an :class:`Args`.

    ``to_text``, if given, converts option values and command arguments.
    Raises :class:`ArgumentError` when an option is given more than once.
    """
    convert = to_text if to_text is not None else str
    result = Args(name=_program_name(argv[0]) if argv else "")

    def add(key: str, value: Optional[str]) -> None:
        if key in result.opts:
            raise ArgumentError(f"option specified more than once: {key}")
        result.opts[key] = value

    for token in argv[1:]:
        if token.startswith("--"):
            result.optc += 1
            body = token[2:]
            key, sep, value = body.partition("=")
            add(key, convert(value) if sep else None)
        elif token.startswith("-"):
            result.optc += 1
            for char in token[1:]:
                add(char, None)
        elif result.cmd is None:
            result.cmd = token
        else:
            result.args.append(convert(token))
    return result