"""Span timing for service calls.

Off by default. ``--verbose`` turns it on, after which every ``@traced``
service method records a tree of spans (one per response file read during
expansion, for example) and attaches it to ``ServiceResult.meta["telemetry"]``.
While off, ``traced`` and ``trace_span`` cost one ContextVar lookup.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from responsefile.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("responsefile_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("responsefile_span", default=None)


@dataclass
class Span:
    """One timed region; ``fields`` holds caller-supplied context."""

    name: str
    fields: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)
    started_ns: int = field(default_factory=time.perf_counter_ns)
    finished_ns: int | None = None

    @property
    def elapsed_ms(self) -> float:
        if self.finished_ns is None:
            return 0.0
        return (self.finished_ns - self.started_ns) / 1_000_000

    def finish(self) -> None:
        if self.finished_ns is None:
            self.finished_ns = time.perf_counter_ns()

    def as_tree(self) -> dict[str, Any]:
        node: dict[str, Any] = {"name": self.name, "ms": round(self.elapsed_ms, 3)}
        if self.fields:
            node["fields"] = dict(self.fields)
        if self.children:
            node["children"] = [c.as_tree() for c in self.children]
        return node


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)
    _active.set(None)


@contextmanager
def _activate(span: Span) -> Generator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.finish()
        _active.reset(token)


@contextmanager
def trace_span(name: str, **fields: Any) -> Generator[Span | None]:
    """Time a nested region of the current ``@traced`` call.

    Yields None unless telemetry is on and a traced call is in progress, so
    callers guard any extra annotation with ``if span:``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name, fields=fields)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Record a root span around a service method.

    A returned ``ServiceResult`` gets the span tree merged into its ``meta``.
    Each finished root span is also logged at DEBUG.
    """
    log = structlog.get_logger("responsefile.telemetry")

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        ok = False
        with _activate(Span(name=func.__qualname__)) as root:
            try:
                result = func(*args, **kwargs)
                ok = not isinstance(result, ServiceResult) or result.ok
            finally:
                root.finish()
                log.debug(
                    "span.complete",
                    span=root.name,
                    ms=round(root.elapsed_ms, 3),
                    ok=ok,
                    children=len(root.children),
                )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.as_tree()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper
