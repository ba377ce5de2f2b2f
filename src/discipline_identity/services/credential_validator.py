"""Validation rules for user names and passwords.

The validator is a plain object handed to IdentityService at construction,
so tests and alternative deployments can swap the limits without touching
any global state.
"""

from __future__ import annotations

from discipline.domain.shared.exceptions import ValidationError


class CredentialValidator:
    """Validates registration credentials.

    Name rules:
    - required, 3-100 characters
    - first character is a letter
    - only letters, digits and underscores

    Password rules:
    - at least 8 characters
    - at most 72 bytes once UTF-8 encoded (bcrypt ignores anything longer)
    """

    NAME_MIN_LENGTH = 3
    NAME_MAX_LENGTH = 100
    PASSWORD_MIN_LENGTH = 8
    PASSWORD_MAX_BYTES = 72

    def __init__(
        self,
        name_min_length: int = NAME_MIN_LENGTH,
        name_max_length: int = NAME_MAX_LENGTH,
        password_min_length: int = PASSWORD_MIN_LENGTH,
        password_max_bytes: int = PASSWORD_MAX_BYTES,
    ):
        self._name_min = name_min_length
        self._name_max = name_max_length
        self._password_min = password_min_length
        self._password_max_bytes = password_max_bytes

    def validate_registration(self, name: str, password: str) -> None:
        """Validate both fields, reporting every violation at once.

        Raises
        ------
        ValidationError
            With ``details["errors"]`` listing ``{"field", "message"}`` items
        """
        errors = self.name_errors(name) + self.password_errors(password)
        if errors:
            self._raise(errors)

    def validate_password(self, password: str) -> None:
        """Validate a password on its own (e.g. when changing it)."""
        errors = self.password_errors(password)
        if errors:
            self._raise(errors)

    def name_errors(self, name: str) -> list[dict[str, str]]:
        if not name:
            return [{"field": "name", "message": "Name is required"}]

        errors = []
        if not (self._name_min <= len(name) <= self._name_max):
            errors.append(
                {
                    "field": "name",
                    "message": (
                        f"Name must be {self._name_min}-{self._name_max} "
                        "characters long"
                    ),
                },
            )
        if not name[0].isalpha():
            errors.append({"field": "name", "message": "Name must start with a letter"})
        if any(not (ch.isalpha() or ch.isdecimal() or ch == "_") for ch in name):
            errors.append(
                {
                    "field": "name",
                    "message": "Name may contain only letters, digits and underscores",
                },
            )
        return errors

    def password_errors(self, password: str) -> list[dict[str, str]]:
        if not password:
            return [{"field": "password", "message": "Password is required"}]

        errors = []
        if len(password) < self._password_min:
            errors.append(
                {
                    "field": "password",
                    "message": (
                        f"Password must be at least {self._password_min} characters"
                    ),
                },
            )
        if len(password.encode("utf-8")) > self._password_max_bytes:
            errors.append(
                {
                    "field": "password",
                    "message": (
                        f"Password cannot exceed {self._password_max_bytes} bytes"
                    ),
                },
            )
        return errors

    @staticmethod
    def _raise(errors: list[dict[str, str]]) -> None:
        summary = "; ".join(error["message"] for error in errors)
        msg = f"Validation failed: {summary}"
        raise ValidationError(msg, details={"errors": errors})
