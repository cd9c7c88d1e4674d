"""Sign-in / sign-up forms, session store, and authentication controller."""

from nyumba.auth.forms import SignInForm, SignUpForm
from nyumba.auth.models import User, UserRole
from nyumba.auth.service import AuthBackend, AuthController, AuthResult, DemoAuthBackend
from nyumba.auth.session import InMemoryStorage, SessionStore, Storage

__all__ = [
    "SignInForm",
    "SignUpForm",
    "User",
    "UserRole",
    "AuthBackend",
    "AuthController",
    "AuthResult",
    "DemoAuthBackend",
    "InMemoryStorage",
    "SessionStore",
    "Storage",
]
