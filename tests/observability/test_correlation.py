"""
Test suite for correlation ID propagation and log helpers.

System role: Verification of logging context
"""

import logging

from study_rag.observability.correlation import (
    CorrelationIdFilter,
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from study_rag.observability.log_utils import safe_log_value


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


class TestCorrelationId:
    """Test suite for correlation ID context helpers."""

    def test_set_should_keep_given_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"
        clear_correlation_id()

    def test_set_without_id_should_generate_one(self) -> None:
        generated = set_correlation_id()

        assert generated
        assert get_correlation_id() == generated
        clear_correlation_id()

    def test_filter_should_attach_id_or_dash(self) -> None:
        log_filter = CorrelationIdFilter()

        set_correlation_id("req-2")
        record = _record()
        assert log_filter.filter(record) is True
        assert record.correlation_id == "req-2"

        clear_correlation_id()
        record = _record()
        log_filter.filter(record)
        assert record.correlation_id == "-"


class TestSafeLogValue:
    """Test suite for safe_log_value."""

    def test_collections_should_be_summarized(self) -> None:
        assert safe_log_value(["a", "b"]) == "list(2 items)"
        assert safe_log_value({"k": 1}) == "dict(1 keys)"
        assert safe_log_value(None) == "None"

    def test_long_strings_should_be_truncated(self) -> None:
        value = safe_log_value("x" * 20, max_length=5)

        assert value == "xxxxx... (truncated, 20 total)"

    def test_vectors_should_be_reported_by_dimension(self) -> None:
        assert safe_log_value([0.1, 0.2, 0.3]) == "vector(3 dims)"

    def test_whitespace_should_be_collapsed(self) -> None:
        assert safe_log_value("What is\n\n  a cell?") == "What is a cell?"
