"""Default host: a console object with the familiar logging surface.

`console` is what an InterceptionRegistry patches when no host is given.
Output goes through rich so `dir` and `table` render structured data;
streams are looked up on every write, so redirecting sys.stdout/sys.stderr
(or pytest's capsys) works.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console as RichConsole
from rich.pretty import Pretty
from rich.table import Table


def _message(args: tuple[Any, ...]) -> str:
    return " ".join(str(a) for a in args)


class Console:
    """stdout/stderr logging surface: log, info, debug, warn, error, and friends."""

    def __init__(self) -> None:
        options = {"markup": False, "highlight": False, "emoji": False, "soft_wrap": True}
        self._out = RichConsole(**options)
        self._err = RichConsole(stderr=True, **options)

    def __repr__(self) -> str:
        return "<consolehook.console>"

    def log(self, *args: Any) -> None:
        self._out.print(_message(args))

    info = log
    debug = log
    dirxml = log

    def warn(self, *args: Any) -> None:
        self._err.print(_message(args))

    error = warn

    def trace(self, *args: Any) -> None:
        """Print the message followed by the caller's stack to stderr."""
        label = f"Trace: {_message(args)}" if args else "Trace"
        stack = traceback.format_stack()[:-1]
        self._err.print(label)
        self._err.print("".join(stack).rstrip())

    def dir(self, obj: Any = None) -> None:
        self._out.print(Pretty(obj))

    def table(self, data: Any = None, columns: Sequence[str] | None = None) -> None:
        """Render a mapping or sequence of rows as a table.

        Rows that are mappings contribute their keys as columns; anything
        else lands in a "Values" column. Data that isn't tabular is logged.
        """
        if isinstance(data, Mapping):
            rows = list(data.items())
        elif isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            rows = list(enumerate(data))
        else:
            self.log(data)
            return

        keys: list[str] = []
        has_values = False
        for _, row in rows:
            if isinstance(row, Mapping):
                keys.extend(str(k) for k in row if str(k) not in keys)
            else:
                has_values = True
        if columns is not None:
            keys = list(columns)

        table = Table("(index)", *keys)
        if has_values:
            table.add_column("Values")
        for index, row in rows:
            if isinstance(row, Mapping):
                cells = {str(k): str(v) for k, v in row.items()}
                values = [cells.get(k, "") for k in keys]
                if has_values:
                    values.append("")
            else:
                values = [""] * len(keys) + [str(row)]
            table.add_row(str(index), *values)
        self._out.print(table)

    def assert_(self, condition: Any = False, *args: Any) -> None:
        """Report to stderr when condition is falsy; never raises."""
        if condition:
            return
        self._err.print(f"Assertion failed: {_message(args)}" if args else "Assertion failed")


# `assert` is a keyword, so the console member is reached through getattr
setattr(Console, "assert", Console.assert_)

console = Console()
