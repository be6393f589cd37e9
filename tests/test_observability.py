"""
Tracing helper tests (in-memory tracer, no SDK)
"""

from contextlib import contextmanager

import pytest

from auto_translate.utils.observability import trace_step


class RecordingSpan:
    def __init__(self):
        self.exceptions = []
        self.statuses = []
        self.attributes = {}

    def is_recording(self):
        return True

    def record_exception(self, exception):
        self.exceptions.append(exception)

    def set_status(self, status):
        self.statuses.append(status)

    def set_attribute(self, key, value):
        self.attributes[key] = value

    def add_event(self, name, attributes=None):
        pass


class RecordingTracer:
    def __init__(self):
        self.span = RecordingSpan()
        self.options = {}

    @contextmanager
    def start_as_current_span(self, name, **options):
        self.options = options
        yield self.span


def test_failing_step_records_exception_once():
    tracer = RecordingTracer()

    with pytest.raises(ValueError):
        with trace_step("translation.fill", {"record.id": "p1"}, tracer=tracer):
            raise ValueError("boom")

    assert tracer.options == {"record_exception": False, "set_status_on_exception": False}
    assert len(tracer.span.exceptions) == 1
    assert len(tracer.span.statuses) == 1
    assert tracer.span.attributes["record.id"] == "p1"
