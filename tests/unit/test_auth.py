"""Unit tests for :mod:`nyumba.auth`.

Covers form validation, the session store, the demo back end, and the
:class:`~nyumba.auth.service.AuthController` success and failure paths.
Async tests run under pytest-asyncio's auto mode.
"""

from __future__ import annotations

import logging

import pytest

from nyumba.auth.forms import SignInForm, SignUpForm, is_valid_email, is_valid_phone
from nyumba.auth.models import User, UserRole
from nyumba.auth.service import DEMO_PASSWORD, AuthController, DemoAuthBackend
from nyumba.auth.session import CURRENT_USER_KEY, InMemoryStorage, SessionStore
from nyumba.core import events
from nyumba.core.exceptions import AuthBackendError, InvalidCredentialsError
from nyumba.core.settings import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Factories / helpers
# ---------------------------------------------------------------------------


def _signup_form(**overrides: str) -> SignUpForm:
    fields = {
        "name": "Chikondi Banda",
        "email": "chikondi@example.com",
        "password": "secret1",
        "confirm_password": "secret1",
        "role": "tenant",
        "phone": "",
    }
    fields.update(overrides)
    return SignUpForm(**fields)


class _FailingBackend:
    """Back end whose every call fails with a transport error."""

    async def sign_in(self, email: str, password: str) -> User:
        raise AuthBackendError("identity service unreachable")

    async def sign_up(self, form: SignUpForm) -> User:
        raise AuthBackendError("identity service unreachable")

    async def sign_out(self) -> None:
        raise AuthBackendError("identity service unreachable")


@pytest.fixture()
def settings(clean_env: None) -> Settings:
    return Settings()


@pytest.fixture()
def controller(settings: Settings) -> AuthController:
    return AuthController(DemoAuthBackend(), SessionStore(), settings)


# ===========================================================================
# Form validation
# ===========================================================================


class TestSignInForm:
    def test_valid(self) -> None:
        assert SignInForm("tenant@example.com", "x").validate() == {}

    def test_empty(self) -> None:
        assert SignInForm().validate() == {
            "email": "Email is required",
            "password": "Password is required",
        }

    def test_bad_email(self) -> None:
        errors = SignInForm("not-an-email", "pw").validate()
        assert errors == {"email": "Please enter a valid email address"}


class TestSignUpForm:
    def test_valid_tenant_without_phone(self) -> None:
        assert _signup_form().validate() == {}

    def test_valid_landlord_with_phone(self) -> None:
        assert _signup_form(role="landlord", phone="+265 999 876 543").validate() == {}

    def test_everything_missing(self) -> None:
        errors = SignUpForm().validate()
        assert errors == {
            "name": "Name is required",
            "email": "Email is required",
            "password": "Password is required",
            "confirm_password": "Please confirm your password",
            "role": "Please select your role",
        }

    def test_short_password(self) -> None:
        errors = _signup_form(password="abc", confirm_password="abc").validate()
        assert errors == {"password": "Password must be at least 6 characters"}

    def test_configurable_password_length(self) -> None:
        errors = _signup_form().validate(min_password_length=10)
        assert errors["password"] == "Password must be at least 10 characters"

    def test_password_mismatch(self) -> None:
        errors = _signup_form(confirm_password="secret2").validate()
        assert errors == {"confirm_password": "Passwords do not match"}

    def test_landlord_requires_phone(self) -> None:
        errors = _signup_form(role="landlord").validate()
        assert errors == {"phone": "Phone number is required for landlords"}

    def test_invalid_phone(self) -> None:
        errors = _signup_form(phone="12-34").validate()
        assert errors == {"phone": "Please enter a valid phone number"}

    def test_unknown_role(self) -> None:
        form = _signup_form(role="admin")
        assert form.user_role is None
        assert form.validate() == {"role": "Please select your role"}

    def test_role_case_insensitive(self) -> None:
        assert _signup_form(role=" Landlord ").user_role is UserRole.LANDLORD

    @pytest.mark.parametrize(
        ("email", "expected"),
        [("a@b.co", True), ("first.last@mail.example.org", True), ("a@b", False), ("@", False)],
    )
    def test_is_valid_email(self, email: str, expected: bool) -> None:
        assert is_valid_email(email) is expected

    @pytest.mark.parametrize(
        ("phone", "expected"),
        [("+265 991 234 567", True), ("(555) 123-4567", True), ("123456789", False), ("phone12345", False)],
    )
    def test_is_valid_phone(self, phone: str, expected: bool) -> None:
        assert is_valid_phone(phone) is expected


# ===========================================================================
# Session store
# ===========================================================================


class TestSessionStore:
    def test_empty_session(self) -> None:
        session = SessionStore()
        assert session.current_user() is None
        assert session.is_signed_in is False

    def test_round_trip_uses_camel_case_json(self) -> None:
        storage = InMemoryStorage()
        session = SessionStore(storage)
        user = User(id="9", name="Ann", email="Ann@Example.com", join_date="March 2024")
        session.set_current_user(user)
        raw = storage.get_item(CURRENT_USER_KEY)
        assert raw is not None
        assert '"joinDate":"March 2024"' in raw
        assert session.current_user() == user
        assert session.current_user().email == "ann@example.com"

    def test_clear(self) -> None:
        storage = InMemoryStorage()
        session = SessionStore(storage)
        session.set_current_user(User(id="1", email="a@b.co"))
        session.clear()
        assert session.current_user() is None
        assert len(storage) == 0

    def test_corrupt_entry_reads_as_signed_out(self, caplog: pytest.LogCaptureFixture) -> None:
        storage = InMemoryStorage()
        storage.set_item(CURRENT_USER_KEY, "{broken")
        with caplog.at_level(logging.WARNING):
            assert SessionStore(storage).current_user() is None
        assert "Discarding unreadable session entry" in caplog.text

    def test_update_profile(self) -> None:
        session = SessionStore()
        session.set_current_user(User(id="1", name="Old", email="a@b.co"))
        updated = session.update_profile(name="New", bio="Hello")
        assert updated is not None
        assert updated.name == "New"
        assert session.current_user().bio == "Hello"

    def test_update_profile_signed_out(self) -> None:
        assert SessionStore().update_profile(name="x") is None


# ===========================================================================
# Demo back end
# ===========================================================================


class TestDemoAuthBackend:
    async def test_known_email_any_password(self) -> None:
        user = await DemoAuthBackend().sign_in(" Tenant@Example.com ", "whatever")
        assert user.name == "John Doe"
        assert user.role is UserRole.TENANT

    async def test_unknown_email_rejected(self) -> None:
        with pytest.raises(InvalidCredentialsError):
            await DemoAuthBackend().sign_in("nobody@example.com", "pw")

    async def test_empty_password_rejected(self) -> None:
        with pytest.raises(InvalidCredentialsError):
            await DemoAuthBackend().sign_in("tenant@example.com", "")

    async def test_sign_up_registers_account(self) -> None:
        backend = DemoAuthBackend()
        user = await backend.sign_up(_signup_form(role="landlord", phone="+265 999 000 111"))
        assert user.role is UserRole.LANDLORD
        assert "chikondi@example.com" in backend
        assert (await backend.sign_in("chikondi@example.com", "pw")) == user

    async def test_latency_is_simulated(self) -> None:
        user = await DemoAuthBackend(latency=0.001).sign_in("landlord@example.com", "pw")
        assert user.is_landlord

    def test_demo_credentials(self) -> None:
        backend = DemoAuthBackend()
        assert backend.demo_credentials("landlord") == ("landlord@example.com", DEMO_PASSWORD)
        assert DemoAuthBackend(users=[]).demo_credentials(UserRole.TENANT) is None


# ===========================================================================
# Controller
# ===========================================================================


class TestAuthControllerSignIn:
    async def test_tenant_redirects_home(self, controller: AuthController) -> None:
        result = await controller.sign_in(SignInForm("tenant@example.com", DEMO_PASSWORD))
        assert result.success is True
        assert result.redirect_path == "/home"
        assert controller.session.current_user() == result.user

    async def test_landlord_redirects_to_dashboard(self, controller: AuthController) -> None:
        result = await controller.sign_in(SignInForm("landlord@example.com", DEMO_PASSWORD))
        assert result.redirect_path == "/dashboard"

    async def test_validation_errors_skip_backend(self, controller: AuthController) -> None:
        result = await controller.sign_in(SignInForm("bad", ""))
        assert result.success is False
        assert set(result.field_errors) == {"email", "password"}
        assert controller.session.current_user() is None

    async def test_invalid_credentials(
        self, controller: AuthController, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            result = await controller.sign_in(SignInForm("stranger@example.com", "pw"))
        assert result.success is False
        assert result.error == "Invalid email or password"
        assert result.redirect_path is None
        assert events.SIGNIN_FAILED in [getattr(r, "event", None) for r in caplog.records]

    async def test_backend_failure_is_reported_not_raised(self, settings: Settings) -> None:
        controller = AuthController(_FailingBackend(), SessionStore(), settings)
        result = await controller.sign_in(SignInForm("tenant@example.com", "pw"))
        assert result.success is False
        assert result.error == "Failed to sign in. Please try again."


class TestAuthControllerSignUp:
    async def test_success(self, controller: AuthController) -> None:
        result = await controller.sign_up(_signup_form())
        assert result.success is True
        assert result.message == "Account created successfully! Redirecting..."
        assert result.redirect_path == "/home"
        assert controller.session.current_user().email == "chikondi@example.com"

    async def test_landlord_success(self, controller: AuthController) -> None:
        result = await controller.sign_up(_signup_form(role="landlord", phone="0999 123 4567"))
        assert result.redirect_path == "/dashboard"

    async def test_existing_account(self, controller: AuthController) -> None:
        result = await controller.sign_up(_signup_form(email="tenant@example.com"))
        assert result.success is False
        assert result.error == "An account with this email already exists."

    async def test_password_policy_from_settings(self, clean_env: None) -> None:
        controller = AuthController(DemoAuthBackend(), SessionStore(), Settings(min_password_length=12))
        result = await controller.sign_up(_signup_form())
        assert result.field_errors == {"password": "Password must be at least 12 characters"}

    async def test_backend_failure(self, settings: Settings) -> None:
        controller = AuthController(_FailingBackend(), SessionStore(), settings)
        result = await controller.sign_up(_signup_form())
        assert result.error == "Failed to create account. Please try again."


class TestAuthControllerSignOut:
    async def test_sign_out_clears_session(self, controller: AuthController) -> None:
        await controller.sign_in(SignInForm("tenant@example.com", "pw"))
        result = await controller.sign_out()
        assert result.success is True
        assert result.redirect_path == "/"
        assert controller.session.is_signed_in is False

    async def test_sign_out_backend_failure_still_clears(self, settings: Settings) -> None:
        session = SessionStore()
        session.set_current_user(User(id="1", email="a@b.co"))
        result = await AuthController(_FailingBackend(), session, settings).sign_out()
        assert result.success is False
        assert result.error == "Failed to sign out"
        assert session.current_user() is None
