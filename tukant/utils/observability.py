"""Logging, metrics and tracing helpers shared by the rhyme engine.

Metrics are exported through ``prometheus_client`` and spans through the
OpenTelemetry API.  Without an OpenTelemetry SDK configured the tracer hands
out non-recording spans, so instrumented code paths cost next to nothing.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram

_TRACER_NAME = "tukant"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Simple adapter that renders structured context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra or {})
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra or {})
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(
                    event_context, sort_keys=True, default=str, ensure_ascii=False
                )
            except TypeError:
                payload = json.dumps(
                    {str(k): str(v) for k, v in event_context.items()},
                    sort_keys=True,
                    ensure_ascii=False,
                )
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


def _registered_collector(name: str) -> Any:
    # prometheus_client keeps no public lookup; engines constructed more than
    # once in a process must share the collector registered first.
    return REGISTRY._names_to_collectors.get(name)  # type: ignore[attr-defined]


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Counter:
    """Create (or reuse) a Prometheus counter called ``name``."""

    try:
        return Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _registered_collector(name)
        if existing is None:
            raise
        return existing


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> Histogram:
    """Create (or reuse) a Prometheus histogram called ``name``."""

    try:
        return Histogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        existing = _registered_collector(name)
        if existing is None:
            raise
        return existing


def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span as the current span.

    Usable as a context manager; attributes whose values OpenTelemetry cannot
    store are converted to strings.
    """

    tracer = trace.get_tracer(_TRACER_NAME)
    return tracer.start_as_current_span(
        name, attributes=_coerce_attributes(attributes or {})
    )


def _coerce_attributes(attributes: Dict[str, Any]) -> Dict[str, Any]:
    coerced: Dict[str, Any] = {}
    for key, value in attributes.items():
        if not isinstance(key, str) or value is None:
            continue
        if isinstance(value, (bool, int, float, str)):
            coerced[key] = value
        else:
            coerced[key] = str(value)
    return coerced


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span`` if one is active."""

    if span is None:
        return
    for key, value in _coerce_attributes(attributes).items():
        span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Mark ``span`` as failed with ``error``."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
