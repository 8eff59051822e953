"""Presence verifiers backing the ``unique`` and ``exists`` rules."""

from .in_memory import InMemoryPresenceVerifier
from .sqlalchemy_verifier import SqlAlchemyPresenceVerifier

__all__ = ["InMemoryPresenceVerifier", "SqlAlchemyPresenceVerifier"]
