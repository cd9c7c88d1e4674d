"""Sign-in and sign-up form validation.

Each form is a plain value holding what the user typed.  ``validate()``
returns a ``{field: message}`` dict; an empty dict means the form may be
submitted.  Messages are the inline texts shown under each field.

Typical usage::

    form = SignUpForm(name="Ann", email="ann@example.com", password="secret1",
                      confirm_password="secret1", role="tenant")
    errors = form.validate()
    if not errors:
        ...  # hand the form to the auth controller
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from nyumba.auth.models import UserRole

__all__ = ["SignInForm", "SignUpForm", "is_valid_email", "is_valid_phone"]

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_PHONE_RE = re.compile(r"^\+?[\d\s\-()]{10,}$")

DEFAULT_MIN_PASSWORD_LENGTH: int = 6


def is_valid_email(email: str) -> bool:
    return _EMAIL_RE.search(email) is not None


def is_valid_phone(phone: str) -> bool:
    """Loose phone check: optional ``+`` then 10+ digits, spaces, dashes or parens."""
    return _PHONE_RE.match(phone) is not None


def _email_error(email: str) -> str | None:
    if not email.strip():
        return "Email is required"
    if not is_valid_email(email):
        return "Please enter a valid email address"
    return None


@dataclass(frozen=True)
class SignInForm:
    email: str = ""
    password: str = ""

    def validate(self) -> dict[str, str]:
        errors: dict[str, str] = {}
        email_error = _email_error(self.email)
        if email_error:
            errors["email"] = email_error
        if not self.password:
            errors["password"] = "Password is required"
        return errors


@dataclass(frozen=True)
class SignUpForm:
    """Fields of the create-account form.

    Attributes:
        name: Full name.
        email: Account email.
        password: Chosen password.
        confirm_password: Must equal :attr:`password`.
        role: ``"tenant"`` or ``"landlord"``; empty until chosen.
        phone: Optional for tenants, required for landlords.
    """

    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: str = ""
    phone: str = ""

    @property
    def user_role(self) -> UserRole | None:
        try:
            return UserRole(self.role.strip().lower())
        except ValueError:
            return None

    def validate(self, min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH) -> dict[str, str]:
        errors: dict[str, str] = {}

        if not self.name.strip():
            errors["name"] = "Name is required"

        email_error = _email_error(self.email)
        if email_error:
            errors["email"] = email_error

        if not self.password:
            errors["password"] = "Password is required"
        elif len(self.password) < min_password_length:
            errors["password"] = f"Password must be at least {min_password_length} characters"

        if not self.confirm_password:
            errors["confirm_password"] = "Please confirm your password"
        elif self.password != self.confirm_password:
            errors["confirm_password"] = "Passwords do not match"

        role = self.user_role
        if role is None:
            errors["role"] = "Please select your role"

        if role is UserRole.LANDLORD and not self.phone.strip():
            errors["phone"] = "Phone number is required for landlords"
        elif self.phone and not is_valid_phone(self.phone):
            errors["phone"] = "Please enter a valid phone number"

        return errors
