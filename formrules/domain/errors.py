"""Domain errors for formrules."""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Error message (must not contain submitted values)
        """
        super().__init__(message)
        self.message = message


class UnknownRuleError(DomainError):
    """Raised when a rule token names a rule the validator does not know."""

    def __init__(self, rule: str) -> None:
        super().__init__(f"Unknown validation rule: {rule}")
        self.rule = rule


class PresenceVerifierMissingError(DomainError):
    """Raised when a database rule is evaluated without a presence verifier."""

    def __init__(self, rule: str) -> None:
        super().__init__(f"Rule '{rule}' requires a presence verifier")
        self.rule = rule


class ValidationFailedError(DomainError):
    """Raised when submitted input does not pass its rules."""

    def __init__(self, errors: dict) -> None:
        """
        Initialize validation failure.

        Args:
            errors: Key -> list of messages
        """
        super().__init__(f"Validation failed for {len(errors)} field(s): {', '.join(errors)}")
        self.errors = errors
