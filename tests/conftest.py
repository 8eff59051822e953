"""Test configuration and shared fixtures."""

import pytest

from formrules.application.form_field import FormField
from formrules.domain.rules import RuleSet
from formrules.infrastructure.presence import InMemoryPresenceVerifier

from tests.fakes import RecordingFactory, StubField, StubForm


@pytest.fixture
def rule_set() -> RuleSet:
    """Empty rule set."""
    return RuleSet()


@pytest.fixture
def new_form() -> StubForm:
    """Form for a record that is not persisted yet."""
    return StubForm()


@pytest.fixture
def edit_form() -> StubForm:
    """Form editing the record with key 42."""
    return StubForm(key=42)


@pytest.fixture
def stub_field() -> StubField:
    """Single-column field."""
    return StubField()


@pytest.fixture
def recording_factory() -> RecordingFactory:
    """Validator factory that records its arguments."""
    return RecordingFactory()


@pytest.fixture
def users_verifier() -> InMemoryPresenceVerifier:
    """Presence verifier with a users table."""
    return InMemoryPresenceVerifier({
        "users": [
            {"id": 1, "email": "taken@example.com", "role": "admin"},
            {"id": 42, "email": "mine@example.com", "role": "editor"},
        ],
    })


@pytest.fixture
def email_field(edit_form) -> FormField:
    """Email field bound to a form editing record 42."""
    return FormField("email", "Email", form=edit_form)
