"""Shared logging for consolehook.

Silent unless CONSOLEHOOK_LOG names a file, in which case every component
logs there via Python's logging module.
Filter with grep: grep 'consolehook.registry' "$CONSOLEHOOK_LOG"
"""

import logging
import os

_LOG_ENV = "CONSOLEHOOK_LOG"

_root = logging.getLogger("consolehook")

if os.environ.get(_LOG_ENV):
    _handler: logging.Handler = logging.FileHandler(os.environ[_LOG_ENV])
    _handler.setFormatter(
        logging.Formatter("%(asctime)s %(name)s %(message)s", datefmt="%H:%M:%S")
    )
    _root.setLevel(logging.DEBUG)
else:
    _handler = logging.NullHandler()

_root.addHandler(_handler)
# don't propagate to root logger: the root logger may itself be an
# intercepted host, and library records shouldn't show up in app output
_root.propagate = False


def get_logger(name: str) -> logging.Logger:
    return _root.getChild(name)
