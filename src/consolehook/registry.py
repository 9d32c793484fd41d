"""Method interception registry.

Replaces logging-surface methods ("log", "warn", "error", ...) on a host
object with a trampoline that runs registered observers and then, unless the
registry is silent, forwards the call to the original implementation.

    hook = InterceptionRegistry(logger)
    hook.attach("log", lambda method, args: seen.append(args))
    hook.attach(lambda method, args: ...)  # every supported method
    ...
    hook.detach()  # put every original back
"""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .log import get_logger

if TYPE_CHECKING:
    from .config import Config

_log = get_logger("registry")

Observer = Callable[[str, tuple[Any, ...]], Any]

# JS console surface first, then the names Python's logging module uses.
# No "exception": it delegates to error(), which would dispatch a second time.
CONVENTIONAL_METHODS: tuple[str, ...] = (
    "assert",
    "debug",
    "dir",
    "dirxml",
    "error",
    "info",
    "log",
    "table",
    "trace",
    "warn",
    "critical",
    "warning",
)


@dataclass(frozen=True)
class OriginalBinding:
    """What was installed on the host before interception began."""

    func: Callable[..., Any]
    # True if the member lived in the host's own __dict__ rather than
    # being inherited from its class
    local: bool


def _lookup(host: Any, method: str) -> OriginalBinding:
    try:
        local = method in vars(host)
    except TypeError:
        # no __dict__ (slots, builtins); setattr is all we can do
        local = True
    return OriginalBinding(func=getattr(host, method), local=local)


def _forwards_stacklevel(host: Any) -> bool:
    """Loggers attribute records to a caller frame; the trampoline adds one."""
    return isinstance(host, logging.Logger) or host is logging


class InterceptionRegistry:
    """Observers per method name, plus the originals needed to undo patching.

    Invariant: a method has an entry in ``_originals`` exactly while the
    host's member of that name is this registry's trampoline.
    """

    def __init__(
        self,
        host: Any = None,
        silent: bool = False,
        methods: Iterable[str] | None = None,
    ) -> None:
        if host is None:
            from .host import console

            host = console
        self.host = host
        self.silent = silent
        candidates = CONVENTIONAL_METHODS if methods is None else tuple(methods)
        self.supported_methods: tuple[str, ...] = tuple(
            m for m in candidates if callable(getattr(host, m, None))
        )
        self._observers: dict[str, list[Observer]] = {}
        self._originals: dict[str, OriginalBinding] = {}
        self._lock = threading.RLock()
        self._local = threading.local()

    @classmethod
    def from_config(cls, config: Config, host: Any = None) -> InterceptionRegistry:
        """Build a registry from the [registry] section of a loaded config."""
        return cls(host, silent=config.registry.silent, methods=config.registry.methods)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(host={self.host!r}, silent={self.silent}, "
            f"intercepted={list(self.intercepted)})"
        )

    def __enter__(self) -> InterceptionRegistry:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    @property
    def dispatching(self) -> bool:
        """True while this thread is running observers for some call."""
        return getattr(self._local, "dispatching", False)

    @property
    def intercepted(self) -> tuple[str, ...]:
        """Methods whose host member is currently the trampoline."""
        with self._lock:
            return tuple(self._originals)

    def is_intercepted(self, method: str) -> bool:
        with self._lock:
            return method in self._originals

    def observers(self, method: str) -> list[Observer]:
        """Observers for ``method`` in invocation order (a copy)."""
        with self._lock:
            return list(self._observers.get(method, ()))

    def attach(
        self, method: str | Observer, observer: Observer | None = None
    ) -> InterceptionRegistry:
        """Register an observer for one method, or for all of them.

        ``attach("log", fn)`` watches a single method; ``attach(fn)`` watches
        every supported method. The same observer may be attached more than
        once and then fires once per registration.
        """
        if not isinstance(method, str):
            observer = method
            for name in self.supported_methods:
                self.attach(name, observer)
            return self

        if not callable(observer):
            raise TypeError(f"observer for {method!r} must be callable, got {observer!r}")

        with self._lock:
            self._observers.setdefault(method, []).append(observer)
            if method not in self._originals and method in self.supported_methods:
                self._override(method)
        return self

    def detach(
        self, method: str | None = None, observer: Observer | None = None
    ) -> InterceptionRegistry:
        """Remove observers and restore originals once a method has none left.

        ``detach()`` clears and restores every intercepted method,
        ``detach("log")`` clears all observers of one method, and
        ``detach("log", fn)`` removes only the registrations of ``fn``.
        """
        with self._lock:
            if method is None:
                for name in self.supported_methods:
                    if name in self._originals:
                        self.detach(name)
                # unsupported names may still hold recorded observers
                self._observers.clear()
                return self

            current = self._observers.get(method)
            if current is None:
                return self
            if observer is None:
                current.clear()
            else:
                # == rather than `is`: each read of obj.method builds a new bound method
                current[:] = [o for o in current if o != observer]
            _log.debug("detached from %s, %d observer(s) left", method, len(current))
            if not current:
                del self._observers[method]
                self._restore(method)
        return self

    def _override(self, method: str) -> None:
        original = _lookup(self.host, method)
        self._originals[method] = original
        adjust_stacklevel = _forwards_stacklevel(self.host)

        @functools.wraps(original.func)
        def trampoline(*args: Any, **kwargs: Any) -> Any:
            self._dispatch(method, args)
            if not self.silent:
                if adjust_stacklevel:
                    kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
                return original.func(*args, **kwargs)
            return None

        setattr(self.host, method, trampoline)
        _log.debug("intercepting %s on %r", method, self.host)

    def _dispatch(self, method: str, args: tuple[Any, ...]) -> None:
        if self.dispatching:
            return
        with self._lock:
            observers = list(self._observers.get(method, ()))
        self._local.dispatching = True
        try:
            for observer in observers:
                observer(method, args)
        finally:
            self._local.dispatching = False

    def _restore(self, method: str) -> None:
        original = self._originals.pop(method, None)
        if original is None:
            return
        if original.local:
            setattr(self.host, method, original.func)
        else:
            delattr(self.host, method)
        _log.debug("restored %s on %r", method, self.host)


Hook = InterceptionRegistry
