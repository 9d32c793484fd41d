"""An observer that remembers what it saw."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Call:
    method: str
    args: tuple[Any, ...]


@dataclass(eq=False)
class CallRecorder:
    """Observer that appends every dispatch to ``calls``.

    hook.attach(recorder := CallRecorder())
    console.log("hi")
    recorder.calls  # [Call(method="log", args=("hi",))]
    """

    calls: list[Call] = field(default_factory=list)

    def __call__(self, method: str, args: tuple[Any, ...]) -> None:
        self.calls.append(Call(method, tuple(args)))

    def for_method(self, method: str) -> list[Call]:
        return [c for c in self.calls if c.method == method]

    def clear(self) -> None:
        self.calls.clear()
