"""Tagged identity-provider errors and their user-facing messages.

Provider failures arrive as raw codes (Firebase REST codes such as
``EMAIL_NOT_FOUND`` or SDK-style ``auth/user-not-found`` codes). They are
converted once, at the provider boundary, into an ``AuthError`` subclass
with a stable ``code``. Callers branch on the type, never on strings.
"""

from typing import Optional


class AuthError(Exception):
    code = "auth/unknown"

    def __init__(self, message: Optional[str] = None, provider_code: Optional[str] = None):
        super().__init__(message or self.code)
        self.provider_code = provider_code


class UserNotFoundError(AuthError):
    code = "auth/user-not-found"


class WrongPasswordError(AuthError):
    code = "auth/wrong-password"


class TooManyAttemptsError(AuthError):
    code = "auth/too-many-requests"


class EmailAlreadyInUseError(AuthError):
    code = "auth/email-already-in-use"


class WeakPasswordError(AuthError):
    code = "auth/weak-password"


class InvalidEmailError(AuthError):
    code = "auth/invalid-email"


class UserDisabledError(AuthError):
    code = "auth/user-disabled"


class InvalidTokenError(AuthError):
    code = "auth/invalid-id-token"


class SignInCancelledError(AuthError):
    code = "auth/popup-closed-by-user"


class PopupBlockedError(AuthError):
    code = "auth/popup-blocked"


class NetworkError(AuthError):
    code = "auth/network-request-failed"


class UnknownAuthError(AuthError):
    code = "auth/unknown"


_ERROR_TYPES = (
    UserNotFoundError,
    WrongPasswordError,
    TooManyAttemptsError,
    EmailAlreadyInUseError,
    WeakPasswordError,
    InvalidEmailError,
    UserDisabledError,
    InvalidTokenError,
    SignInCancelledError,
    PopupBlockedError,
    NetworkError,
)

# Identity Toolkit REST error messages
_REST_CODES = {
    "EMAIL_NOT_FOUND": UserNotFoundError,
    "INVALID_PASSWORD": WrongPasswordError,
    "INVALID_LOGIN_CREDENTIALS": WrongPasswordError,
    "TOO_MANY_ATTEMPTS_TRY_LATER": TooManyAttemptsError,
    "EMAIL_EXISTS": EmailAlreadyInUseError,
    "WEAK_PASSWORD": WeakPasswordError,
    "INVALID_EMAIL": InvalidEmailError,
    "MISSING_EMAIL": InvalidEmailError,
    "USER_DISABLED": UserDisabledError,
    "INVALID_ID_TOKEN": InvalidTokenError,
    "USER_NOT_FOUND": InvalidTokenError,
    "TOKEN_EXPIRED": InvalidTokenError,
}

_SDK_CODES = {cls.code: cls for cls in _ERROR_TYPES}
_SDK_CODES["auth/cancelled-popup-request"] = SignInCancelledError
_SDK_CODES["auth/user-token-expired"] = InvalidTokenError


def error_from_provider_code(code: str, message: Optional[str] = None) -> AuthError:
    """Map a raw provider code to its tagged error.

    REST codes may carry a suffix (``WEAK_PASSWORD : Password should be at
    least 6 characters``); only the part before the colon is matched.
    """
    raw = (code or "").strip()
    key = raw.split(":", 1)[0].strip()
    cls = _SDK_CODES.get(key) or _REST_CODES.get(key) or UnknownAuthError
    return cls(message or raw or None, provider_code=raw)


NETWORK_MESSAGE = "Network error. Please check your connection"

_MESSAGES = {
    "sign-in": {
        UserNotFoundError: "No account found with this email. Please create an account first.",
        WrongPasswordError: "Incorrect password. Please try again.",
        TooManyAttemptsError: "Too many failed attempts. Please try again later.",
    },
    "sign-up": {
        EmailAlreadyInUseError: "An account with this email already exists. Please sign in instead.",
        WeakPasswordError: "Password is too weak. Please use at least 6 characters.",
        InvalidEmailError: "Please enter a valid email address.",
    },
    "google": {
        SignInCancelledError: "Sign in was cancelled. Please try again.",
        PopupBlockedError: "Pop-up was blocked. Please allow pop-ups and try again.",
    },
}

_DEFAULT_MESSAGES = {
    "sign-in": "Invalid email or password. Please try again.",
    "sign-up": "Failed to create account. Please try again.",
    "google": "Failed to sign in with Google. Please try again.",
}


def user_message(error: AuthError, operation: str) -> str:
    """User-facing message for an auth failure during ``operation``.

    ``operation`` is one of ``sign-in``, ``sign-up`` or ``google``.
    """
    if operation not in _DEFAULT_MESSAGES:
        raise ValueError(f"Unknown auth operation: {operation}")
    if isinstance(error, NetworkError):
        return NETWORK_MESSAGE
    return _MESSAGES[operation].get(type(error), _DEFAULT_MESSAGES[operation])
