"""Test logging sanitizers and context."""

from formrules.shared.logging import get_correlation_id, inject_correlation_id, sanitize_for_log
from formrules.shared.logging.context import with_request_context
from formrules.shared.logging.sanitizers import SensitiveDataProcessor


class TestSanitizers:
    """Test masking of sensitive log fields."""

    def test_redacts_sensitive_names(self):
        result = sanitize_for_log({"password": "hunter2", "api_key": "k", "field": "email"})
        assert result == {"password": "***REDACTED***", "api_key": "***REDACTED***", "field": "email"}

    def test_masks_email(self):
        assert sanitize_for_log({"email": "someone@example.com"})["email"] == "s***@example.com"

    def test_masks_identity(self):
        assert sanitize_for_log({"identity": "123456"})["identity"] == "***56"

    def test_nested(self):
        result = sanitize_for_log({"input": {"token": "t"}, "items": [{"secret": "s"}, 1]})
        assert result == {"input": {"token": "***REDACTED***"}, "items": [{"secret": "***REDACTED***"}, 1]}

    def test_processor(self):
        event = SensitiveDataProcessor()(None, "info", {"event": "x", "password": "p"})
        assert event["password"] == "***REDACTED***"


class TestContext:
    """Test correlation ID handling."""

    def test_inject(self):
        inject_correlation_id("corr-123")
        assert get_correlation_id() == "corr-123"

    def test_request_context(self):
        @with_request_context(correlation_id="corr-abc")
        def handler():
            return get_correlation_id()

        assert handler() == "corr-abc"
