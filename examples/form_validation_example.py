"""
Complete usage example of formrules.

This script shows how a form configures field rules and validates a
submission:
1. Rule configuration per phase (creation / update / default)
2. Validation of a create request and of an update request
3. Inspection of the error bag
"""

from formrules.application.form_field import FormField
from formrules.application.use_cases.validate_form import ValidateFormRequest, ValidateFormUseCase
from formrules.domain.rules.engine import validator_factory
from formrules.infrastructure.presence import InMemoryPresenceVerifier


class UserForm:
    """Form editing a user record (key None for new users)."""

    def __init__(self, key=None):
        self.key = key

    def get_key(self):
        return self.key


def build_fields(form):
    return [
        FormField("name", "Name", form=form).rules("required|max:50"),
        FormField("email", "E-mail", form=form)
        .rules("required|email|unique:users,email,{{id}}")
        .creation_rules("required|email|unique:users,email", {"unique": "This e-mail is already registered."}),
        FormField(["start", "end"], "Contract", form=form).rules("required|date"),
    ]


def main():
    """Validate a create and an update submission."""

    print("=" * 60)
    print("FORMRULES - EXAMPLE")
    print("=" * 60)

    verifier = InMemoryPresenceVerifier({
        "users": [{"id": 7, "email": "ann@example.com"}],
    })
    factory = validator_factory(presence_verifier=verifier)

    # 1. New user with an e-mail that is already taken
    create = ValidateFormUseCase(build_fields(UserForm()), factory=factory).execute(
        ValidateFormRequest(data={"name": "Ann", "email": "ann@example.com", "start": "2024-01-01"}, method="POST")
    )
    print(f"\nCreate passed: {create.passed}")
    for key, messages in create.errors.items():
        print(f"  {key}: {'; '.join(messages)}")

    # 2. Ann updating her own record keeps her e-mail
    update = ValidateFormUseCase(build_fields(UserForm(key=7)), factory=factory).execute(
        ValidateFormRequest(data={"name": "Ann", "email": "ann@example.com", "end": "not a date"}, method="PUT")
    )
    print(f"\nUpdate passed: {update.passed}")
    for key, messages in update.errors.items():
        print(f"  {key}: {'; '.join(messages)}")


if __name__ == "__main__":
    main()
