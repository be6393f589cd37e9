"""
Observability - OpenTelemetry tracing for the auto-translation pipeline

Spans are created through the OpenTelemetry API only. Without a configured
SDK the global tracer is a no-op, so every helper here is safe to call from
tests and from hosts that do not export traces.
"""

import os
import logging
from typing import Dict, Any, Optional
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEFAULT_TRACER_MODULE_NAME = "auto_translate"
DEFAULT_TRACER_VERSION = "0.1.0"

# Span attributes are truncated past this length
MAX_ATTRIBUTE_LENGTH = 1000


# =============================================================================
# Tracer factory
# =============================================================================

def get_tracer(
    module_name: Optional[str] = None,
    version: Optional[str] = None
) -> trace.Tracer:
    """
    Get the OpenTelemetry tracer for the add-on.

    Configured through environment variables:
    - TRACER_MODULE_NAME: module name (default: "auto_translate")
    - TRACER_LIBRARY_VERSION: version (default: "0.1.0")

    Example:
        tracer = get_tracer()
        with tracer.start_as_current_span("translation.fill") as span:
            ...
    """
    return trace.get_tracer(
        instrumenting_module_name=module_name or os.getenv(
            "TRACER_MODULE_NAME", DEFAULT_TRACER_MODULE_NAME
        ),
        instrumenting_library_version=version or os.getenv(
            "TRACER_LIBRARY_VERSION", DEFAULT_TRACER_VERSION
        )
    )


# =============================================================================
# Span helpers
# =============================================================================

def _safe_value(value: Any) -> Any:
    if isinstance(value, (str, bool, int, float)):
        return value
    return str(value)[:MAX_ATTRIBUTE_LENGTH]


def add_span_event(
    span: trace.Span,
    event_name: str,
    attributes: Optional[Dict[str, Any]] = None
) -> None:
    """
    Add a timestamped event to a span.

    Args:
        span: Target span
        event_name: Event name (e.g., "pair_translated")
        attributes: Primitive values are kept, anything else is stringified
    """
    if span and span.is_recording():
        safe_attrs = {k: _safe_value(v) for k, v in (attributes or {}).items()}
        span.add_event(event_name, safe_attrs)


def set_span_attribute(span: trace.Span, key: str, value: Any) -> None:
    """Set a single attribute on a recording span"""
    if span and span.is_recording():
        span.set_attribute(key, _safe_value(value))


def set_span_status(
    span: trace.Span,
    success: bool,
    message: Optional[str] = None
) -> None:
    """Mark a span OK or ERROR"""
    if span and span.is_recording():
        if success:
            span.set_status(Status(StatusCode.OK))
        else:
            span.set_status(Status(StatusCode.ERROR, message or "Error"))


def record_exception(span: trace.Span, exception: Exception) -> None:
    """Record an exception on a span and mark it as failed"""
    if span and span.is_recording():
        span.record_exception(exception)
        span.set_status(Status(StatusCode.ERROR, str(exception)))


# =============================================================================
# Pipeline spans
# =============================================================================

@contextmanager
def trace_step(
    step_name: str,
    attributes: Optional[Dict[str, Any]] = None,
    tracer: Optional[trace.Tracer] = None
):
    """
    Context manager tracing one pipeline step.

    Yields a (span, record_event) tuple. The span is marked OK on normal exit
    and the exception is recorded before it propagates.

    Example:
        with trace_step("translation.fill", {"record.id": record.id}) as (span, record):
            record("pair_translated", {"field": "title", "locale": "fr"})
    """
    if tracer is None:
        tracer = get_tracer()

    with tracer.start_as_current_span(
        step_name,
        record_exception=False,
        set_status_on_exception=False
    ) as span:
        for key, value in (attributes or {}).items():
            set_span_attribute(span, key, value)

        def record_event(event_type: str, event_attributes: Dict[str, Any] = None):
            add_span_event(span, event_type, event_attributes)

        try:
            yield span, record_event
            set_span_status(span, True)
        except Exception as e:
            record_exception(span, e)
            raise
