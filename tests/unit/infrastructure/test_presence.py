"""Test presence verifiers."""

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine
from sqlalchemy.orm import Session

from formrules.domain.rules.engine import Validator
from formrules.infrastructure.presence import InMemoryPresenceVerifier, SqlAlchemyPresenceVerifier


@pytest.fixture
def session():
    engine = create_engine("sqlite:///:memory:")
    metadata = MetaData()
    users = Table(
        "users",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("email", String(100)),
    )
    metadata.create_all(engine)

    with engine.begin() as conn:
        conn.execute(users.insert(), [
            {"id": 1, "email": "taken@example.com"},
            {"id": 42, "email": "mine@example.com"},
        ])

    with Session(engine) as session:
        yield session


class TestInMemoryPresenceVerifier:
    """Test in-memory presence checks."""

    def test_count(self, users_verifier):
        assert users_verifier.count("users", "email", "taken@example.com") == 1

    def test_count_excluding(self, users_verifier):
        assert users_verifier.count("users", "email", "mine@example.com", excluded_id=42) == 0

    def test_unknown_table(self, users_verifier):
        assert users_verifier.count("orders", "id", 1) == 0

    def test_add_row(self):
        verifier = InMemoryPresenceVerifier()
        verifier.add_row("tags", {"id": 1, "name": "python"})
        assert verifier.count("tags", "name", "python") == 1


class TestSqlAlchemyPresenceVerifier:
    """Test SQL presence checks against SQLite."""

    def test_count(self, session):
        verifier = SqlAlchemyPresenceVerifier(session)
        assert verifier.count("users", "email", "taken@example.com") == 1
        assert verifier.count("users", "email", "free@example.com") == 0

    def test_count_excluding(self, session):
        verifier = SqlAlchemyPresenceVerifier(session)
        assert verifier.count("users", "email", "mine@example.com", excluded_id=42) == 0
        assert verifier.count("users", "email", "mine@example.com", excluded_id=1) == 1

    def test_count_on_id_column(self, session):
        verifier = SqlAlchemyPresenceVerifier(session)
        assert verifier.count("users", "id", 42, excluded_id=42) == 0

    def test_unique_rule(self, session):
        verifier = SqlAlchemyPresenceVerifier(session)
        validator = Validator(
            {"email": "taken@example.com"},
            {"email": "required|email|unique:users,email"},
            presence_verifier=verifier,
        )
        assert validator.errors() == {"email": ["The email has already been taken."]}

    def test_exists_rule(self, session):
        verifier = SqlAlchemyPresenceVerifier(session)
        assert Validator({"user_id": 42}, {"user_id": "exists:users,id"}, presence_verifier=verifier).passes()
        assert Validator({"user_id": 7}, {"user_id": "exists:users,id"}, presence_verifier=verifier).fails()
