"""Sign-in / sign-up controller and authentication back ends.

The controller is what the sign-in and sign-up screens call.  It validates
the form, hands it to an :class:`AuthBackend`, and on success records the
user in the :class:`~nyumba.auth.session.SessionStore` and picks the redirect
target for the user's role.  Every outcome is returned as an
:class:`AuthResult`; back-end :class:`~nyumba.core.exceptions.AuthError`\\ s
are turned into inline messages and never escape.

Back ends are async because a real one talks to a remote identity service.
:class:`DemoAuthBackend` is the in-memory stand-in used by the CLI and tests.

Typical usage::

    controller = AuthController(DemoAuthBackend(), SessionStore(), settings)
    result = await controller.sign_in(SignInForm("tenant@example.com", "demo123"))
    if result.success:
        navigate(result.redirect_path)
    else:
        show(result.error, result.field_errors)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import uuid4

from nyumba.auth.forms import SignInForm, SignUpForm
from nyumba.auth.models import User, UserRole
from nyumba.auth.session import SessionStore
from nyumba.core import events
from nyumba.core.exceptions import AccountExistsError, AuthError, InvalidCredentialsError
from nyumba.core.settings import Settings

__all__ = [
    "AuthBackend",
    "AuthResult",
    "AuthController",
    "DemoAuthBackend",
    "DEMO_PASSWORD",
]

logger = logging.getLogger(__name__)

#: Password the demo-login buttons fill in.  Any non-empty password works.
DEMO_PASSWORD: str = "demo123"

_SIGNIN_FAILED_MESSAGE = "Failed to sign in. Please try again."
_SIGNUP_FAILED_MESSAGE = "Failed to create account. Please try again."

# ---------------------------------------------------------------------------
# Back-end protocol
# ---------------------------------------------------------------------------


class AuthBackend(Protocol):
    """Opaque authentication service.

    Implementations raise :class:`InvalidCredentialsError`,
    :class:`AccountExistsError` or
    :class:`~nyumba.core.exceptions.AuthBackendError`.
    """

    async def sign_in(self, email: str, password: str) -> User: ...

    async def sign_up(self, form: SignUpForm) -> User: ...

    async def sign_out(self) -> None: ...


# ---------------------------------------------------------------------------
# Result type
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a sign-in, sign-up or sign-out attempt.

    Attributes:
        success: ``True`` when the action completed.
        user: Signed-in user on success.
        redirect_path: Where to navigate next on success.
        message: Confirmation text to show on success.
        error: Form-level error text on failure.
        field_errors: Per-field validation messages on failure.
    """

    success: bool
    user: User | None = None
    redirect_path: str | None = None
    message: str = ""
    error: str | None = None
    field_errors: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Demo back end
# ---------------------------------------------------------------------------

DEMO_USERS: tuple[User, ...] = (
    User(
        id="1",
        name="John Doe",
        email="tenant@example.com",
        avatar="/placeholder.svg?height=40&width=40&text=JD",
        role=UserRole.TENANT,
        join_date="January 2024",
        phone="+265 991 234 567",
        bio="Looking for a comfortable place to call home in Malawi.",
        verified=True,
    ),
    User(
        id="2",
        name="Sarah Johnson",
        email="landlord@example.com",
        avatar="/placeholder.svg?height=40&width=40&text=SJ",
        role=UserRole.LANDLORD,
        join_date="December 2023",
        phone="+265 999 876 543",
        bio="Experienced property owner with multiple listings in Lilongwe and Blantyre.",
        verified=True,
    ),
)


class DemoAuthBackend:
    """In-memory :class:`AuthBackend` for demos and tests.

    Known emails sign in with any non-empty password; there is no password
    check.  Sign-up registers the account for the lifetime of the instance.

    Args:
        users: Seed accounts; defaults to one tenant and one landlord.
        latency: Seconds to sleep before each call, to mimic a remote
            service.
    """

    def __init__(self, users: Iterable[User] | None = None, *, latency: float = 0.0) -> None:
        seed = DEMO_USERS if users is None else tuple(users)
        self._users: dict[str, User] = {user.email: user for user in seed}
        self._latency = latency

    async def _round_trip(self) -> None:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

    async def sign_in(self, email: str, password: str) -> User:
        await self._round_trip()
        user = self._users.get(email.strip().lower())
        if user is None or not password:
            raise InvalidCredentialsError()
        return user

    async def sign_up(self, form: SignUpForm) -> User:
        await self._round_trip()
        email = form.email.strip().lower()
        if email in self._users:
            raise AccountExistsError(email)
        user = User(
            id=uuid4().hex[:12],
            name=form.name.strip(),
            email=email,
            role=form.user_role or UserRole.TENANT,
            join_date=date.today().strftime("%B %Y"),
            phone=form.phone.strip(),
        )
        self._users[email] = user
        return user

    async def sign_out(self) -> None:
        await self._round_trip()

    def demo_credentials(self, role: UserRole | str) -> tuple[str, str] | None:
        """Email/password pair the demo-login button fills in for *role*."""
        for user in self._users.values():
            if user.role == role:
                return user.email, DEMO_PASSWORD
        return None

    def __contains__(self, email: object) -> bool:
        return isinstance(email, str) and email.strip().lower() in self._users


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------


class AuthController:
    """Glue between the auth forms, a back end and the session store.

    Args:
        backend: Authentication service to call.
        session: Where the signed-in user is recorded.
        settings: Supplies password policy and redirect paths.
    """

    def __init__(
        self,
        backend: AuthBackend,
        session: SessionStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._backend = backend
        self._session = session if session is not None else SessionStore()
        self._settings = settings if settings is not None else Settings()

    @property
    def session(self) -> SessionStore:
        return self._session

    def _complete(self, user: User, message: str = "") -> AuthResult:
        self._session.set_current_user(user)
        return AuthResult(
            success=True,
            user=user,
            redirect_path=self._settings.home_path_for(user.role),
            message=message,
        )

    async def sign_in(self, form: SignInForm) -> AuthResult:
        """Validate *form*, authenticate, and start a session."""
        field_errors = form.validate()
        if field_errors:
            return AuthResult(success=False, field_errors=field_errors)

        try:
            user = await self._backend.sign_in(form.email.strip(), form.password)
        except InvalidCredentialsError as exc:
            logger.info("Sign-in rejected for %s", form.email, extra={"event": events.SIGNIN_FAILED})
            return AuthResult(success=False, error=str(exc))
        except AuthError as exc:
            logger.error("Sign-in back end failure: %s", exc, extra={"event": events.SIGNIN_FAILED})
            return AuthResult(success=False, error=_SIGNIN_FAILED_MESSAGE)

        result = self._complete(user)
        logger.info(
            "Signed in %s (%s) -> %s",
            user.email,
            user.role.value,
            result.redirect_path,
            extra={"event": events.SIGNIN_OK},
        )
        return result

    async def sign_up(self, form: SignUpForm) -> AuthResult:
        """Validate *form*, create the account, and start a session."""
        field_errors = form.validate(self._settings.min_password_length)
        if field_errors:
            return AuthResult(success=False, field_errors=field_errors)

        try:
            user = await self._backend.sign_up(form)
        except AccountExistsError:
            logger.info("Sign-up for existing account %s", form.email, extra={"event": events.SIGNUP_FAILED})
            return AuthResult(success=False, error="An account with this email already exists.")
        except AuthError as exc:
            logger.error("Sign-up back end failure: %s", exc, extra={"event": events.SIGNUP_FAILED})
            return AuthResult(success=False, error=_SIGNUP_FAILED_MESSAGE)

        result = self._complete(user, "Account created successfully! Redirecting...")
        logger.info(
            "Created %s account %s -> %s",
            user.role.value,
            user.email,
            result.redirect_path,
            extra={"event": events.SIGNUP_OK},
        )
        return result

    async def sign_out(self) -> AuthResult:
        """End the session.

        The local session is cleared even when the back end call fails.
        """
        self._session.clear()
        try:
            await self._backend.sign_out()
        except AuthError as exc:
            logger.error("Sign-out back end failure: %s", exc)
            return AuthResult(success=False, error="Failed to sign out")
        logger.info("Signed out", extra={"event": events.SIGNOUT})
        return AuthResult(success=True, redirect_path="/")
