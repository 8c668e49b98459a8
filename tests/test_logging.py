"""Tests for structured log output and the audit logger."""

import logging

import pytest

from doctors_portal.core.logging import StructuredFormatter, audit_logger


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="doctors_portal.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="booking created",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for key=value formatting."""

    def test_includes_context_fields(self) -> None:
        output = StructuredFormatter().format(
            make_record(request_id="req-1", email="a@x.com", action="booking_created")
        )

        assert "message=booking created" in output
        assert "request_id=req-1" in output
        assert "email=a@x.com" in output
        assert "action=booking_created" in output

    def test_omits_missing_and_empty_context(self) -> None:
        output = StructuredFormatter().format(make_record(request_id=None))

        assert "level=INFO" in output
        assert "request_id=" not in output
        assert "email=" not in output
        assert "action=" not in output


class TestAuditLogger:
    """Tests for audit events."""

    def test_audit_record_carries_action_and_actor(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="audit"):
            audit_logger.log(
                action="doctor_added",
                actor="admin@x.com",
                entity_type="doctor",
                entity_id="d-1",
            )

        record = caplog.records[-1]
        assert record.action == "doctor_added"
        assert record.email == "admin@x.com"
        assert "entity=doctor:d-1" in record.getMessage()
        assert "action=doctor_added" in StructuredFormatter().format(record)
