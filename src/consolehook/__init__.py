"""Intercept logging-surface methods on an object and run observers on every call."""

from .host import Console, console
from .recorder import Call, CallRecorder
from .registry import CONVENTIONAL_METHODS, Hook, InterceptionRegistry, Observer

__all__ = [
    "CONVENTIONAL_METHODS",
    "Call",
    "CallRecorder",
    "Console",
    "Hook",
    "InterceptionRegistry",
    "Observer",
    "console",
]
