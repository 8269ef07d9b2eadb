"""Command-line settings for a validation run and verbose logging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_PROGRAM = "maavalidatejwt"

_HELP_OPTIONS = frozenset({"-h", "--help"})
_VERBOSE_OPTIONS = frozenset({"-v", "--verbose"})
_VALUE_OPTIONS = {
    "-mrsigner": "mrsigner",
    "-mrenclave": "mrenclave",
    "-productid": "productid",
    "-svn": "svn",
    "-isdebuggable": "debuggable",
}


class HelpRequested(Exception):
    """Raised when usage should be shown and the program should stop successfully."""


@dataclass
class Context:
    """Settings for one validation run."""

    verbose: bool = False
    jwt_filename: str = ""
    mrsigner: str = ""
    productid: str = ""
    mrenclave: str = ""
    svn: str = ""
    debuggable: int = -1

    def dump(self) -> None:
        """Print the settings when running verbosely."""
        if not self.verbose:
            return
        print()
        print("Arguments for this run:")
        rows = (
            ("jwt_filename", self.jwt_filename),
            ("mrsigner", self.mrsigner),
            ("productid", self.productid),
            ("mrenclave", self.mrenclave),
            ("svn", self.svn),
            ("debuggable", self.debuggable),
        )
        for label, value in rows:
            print(f"\t{label:<13}\t:\t{value}")


def usage() -> str:
    """Return the help text."""
    return "\n".join(
        [
            "",
            f"Usage: {_PROGRAM} [options] file",
            "",
            "Arguments:",
            "    -mrsigner <value>        Verify MAA MRSIGNER value is <value>",
            "    -mrenclave <value>       Verify MAA MRENCLAVE value is <value>",
            "    -productid <value>       Verify MAA PRODUCTID value is <value>",
            "    -svn <value>             Verify MAA SVN value is <value>",
            "    -isdebuggable <value>    Verify MAA ISDEBUGGABLE value is <value>",
            "    -v or --verbose          Include verbose messages during validation",
            "    -h or --help             Print Help (this message) and exit",
            "",
        ]
    )


def parse_args(args: Iterable[str]) -> Context:
    """Build a Context from command-line arguments, without the program name.

    Option names are matched case-insensitively. Raises HelpRequested when
    help is asked for, when there are no arguments, when an option lacks its
    value, or when more than one file is given.
    """
    items = iter(list(args))
    context = Context()
    seen_any = False
    for arg in items:
        seen_any = True
        name = arg.lower()
        if name in _HELP_OPTIONS:
            raise HelpRequested(usage())
        if name in _VERBOSE_OPTIONS:
            context.verbose = True
            continue
        field = _VALUE_OPTIONS.get(name)
        if field is not None:
            value = next(items, None)
            if value is None:
                raise HelpRequested(usage())
            if field == "debuggable":
                context.debuggable = int(bool(value))
            else:
                setattr(context, field, value)
            continue
        if not context.jwt_filename:
            context.jwt_filename = arg
            continue
        raise HelpRequested(usage())
    if not seen_any:
        raise HelpRequested(usage())
    return context


_state: dict[str, Context] = {"current": Context()}


def current() -> Context:
    """Return the settings in effect for this process."""
    return _state["current"]


def configure(context: Context) -> None:
    """Make ``context`` the settings in effect for this process."""
    if not isinstance(context, Context):
        raise TypeError(f"expected Context, got {type(context).__name__}")
    _state["current"] = context


def log(message: object) -> None:
    """Print a message only when running verbosely."""
    if current().verbose:
        print(f"\t---\t{message}")


def always_log(message: object) -> None:
    """Print a message regardless of verbosity."""
    print(f"---\t{message}")