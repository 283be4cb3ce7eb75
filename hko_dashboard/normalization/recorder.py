"""Diagnostic recorders for the normalization layer.

A recorder receives one call per fallback taken by the value normalizer::

    recorder.record("field_fallback", {"requested": "value", "used": "text", "raw": {...}})

Recording is advisory.  ``NullRecorder`` is the default so the normalizer
stays side-effect free; the dashboard wires in ``LoggingRecorder``.
"""
from __future__ import annotations

import logging
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class Recorder(Protocol):
    def record(self, event: str, context: dict[str, Any]) -> None:
        ...


class NullRecorder:
    """Discards every event."""

    def record(self, event: str, context: dict[str, Any]) -> None:
        return None


class LoggingRecorder:
    """Write each event as a WARNING on *log* (module logger by default)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def record(self, event: str, context: dict[str, Any]) -> None:
        self.log.warning(
            "normalization %s: requested=%s used=%s raw=%r",
            event,
            context.get("requested"),
            context.get("used"),
            context.get("raw"),
        )


class ListRecorder:
    """Collect events in memory; handy for inspecting which payload fields drift."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def record(self, event: str, context: dict[str, Any]) -> None:
        self.events.append((event, context))


NULL_RECORDER = NullRecorder()


def emit(recorder: Recorder, event: str, context: dict[str, Any]) -> None:
    """Deliver *event* to *recorder*, swallowing any recorder failure."""
    try:
        recorder.record(event, context)
    except Exception:  # noqa: BLE001
        logger.debug("recorder %r failed for event %s", type(recorder).__name__, event)
