"""Identity providers: Firebase Identity Toolkit over REST, and an in-memory one."""

import hashlib
import logging
import os
import re
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

import requests

from auth.errors import (
    EmailAlreadyInUseError,
    InvalidEmailError,
    InvalidTokenError,
    NetworkError,
    SignInCancelledError,
    TooManyAttemptsError,
    UserDisabledError,
    UserNotFoundError,
    WeakPasswordError,
    WrongPasswordError,
    error_from_provider_code,
)
from auth.models import AuthUser

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"
REQUEST_TIMEOUT = 10
MIN_PASSWORD_LENGTH = 6
MAX_FAILED_ATTEMPTS = 5
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class IdentityProvider(ABC):
    """Verifies credentials and returns ``(user, id_token)`` pairs."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> tuple[AuthUser, str]:
        ...

    @abstractmethod
    def sign_up(self, email: str, password: str) -> tuple[AuthUser, str]:
        ...

    @abstractmethod
    def sign_in_with_google(self, google_id_token: str) -> tuple[AuthUser, str]:
        ...

    @abstractmethod
    def lookup(self, id_token: str) -> AuthUser:
        """Resolve an id token to its user; raises InvalidTokenError."""


class FirebaseIdentityProvider(IdentityProvider):
    """Firebase Authentication via the Identity Toolkit REST API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = IDENTITY_TOOLKIT_URL,
        timeout: int = REQUEST_TIMEOUT,
        request_uri: str = "http://localhost",
    ):
        self.api_key = api_key or os.getenv("FIREBASE_API_KEY")
        if not self.api_key:
            raise ValueError("FIREBASE_API_KEY is not set")
        self.base_url = base_url
        self.timeout = timeout
        self.request_uri = request_uri

    def _post(self, method: str, payload: dict) -> dict:
        url = f"{self.base_url}/accounts:{method}"
        try:
            response = requests.post(url, params={"key": self.api_key}, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Identity request %s failed: %s", method, e)
            raise NetworkError(str(e)) from e

        if response.status_code >= 400:
            try:
                message = response.json().get("error", {}).get("message", "")
            except ValueError:
                message = ""
            logger.info("Identity request %s rejected: %s", method, message or response.status_code)
            raise error_from_provider_code(message)
        return response.json()

    @staticmethod
    def _user(data: dict) -> AuthUser:
        return AuthUser(
            uid=data["localId"],
            email=data.get("email", ""),
            display_name=data.get("displayName") or None,
        )

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, str]:
        data = self._post(
            "signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        return self._user(data), data["idToken"]

    def sign_up(self, email: str, password: str) -> tuple[AuthUser, str]:
        data = self._post("signUp", {"email": email, "password": password, "returnSecureToken": True})
        return self._user(data), data["idToken"]

    def sign_in_with_google(self, google_id_token: str) -> tuple[AuthUser, str]:
        if not google_id_token:
            raise SignInCancelledError()
        data = self._post(
            "signInWithIdp",
            {
                "postBody": f"id_token={google_id_token}&providerId=google.com",
                "requestUri": self.request_uri,
                "returnSecureToken": True,
                "returnIdpCredential": True,
            },
        )
        return self._user(data), data["idToken"]

    def lookup(self, id_token: str) -> AuthUser:
        data = self._post("lookup", {"idToken": id_token})
        users = data.get("users") or []
        if not users:
            raise InvalidTokenError()
        return self._user(users[0])


@dataclass
class _Account:
    uid: str
    email: str
    password_hash: str
    display_name: Optional[str] = None
    disabled: bool = False
    failed_attempts: int = 0


def _hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


@dataclass
class InMemoryIdentityProvider(IdentityProvider):
    """Local accounts for development and tests.

    An email is locked after ``max_failed_attempts`` wrong passwords.
    Google sign-in accepts tokens registered with ``register_google_token``.
    """

    max_failed_attempts: int = MAX_FAILED_ATTEMPTS
    accounts: dict[str, _Account] = field(default_factory=dict)
    tokens: dict[str, str] = field(default_factory=dict)
    google_tokens: dict[str, tuple[str, Optional[str]]] = field(default_factory=dict)

    def _issue_token(self, account: _Account) -> tuple[AuthUser, str]:
        token = secrets.token_urlsafe(32)
        self.tokens[token] = account.uid
        return AuthUser(uid=account.uid, email=account.email, display_name=account.display_name), token

    def _create(self, email: str, password_hash: str, display_name: Optional[str] = None) -> _Account:
        account = _Account(
            uid=secrets.token_hex(14),
            email=email,
            password_hash=password_hash,
            display_name=display_name,
        )
        self.accounts[email] = account
        return account

    def sign_in(self, email: str, password: str) -> tuple[AuthUser, str]:
        email = email.strip().lower()
        account = self.accounts.get(email)
        if account is None:
            raise UserNotFoundError()
        if account.disabled:
            raise UserDisabledError()
        if account.failed_attempts >= self.max_failed_attempts:
            raise TooManyAttemptsError()
        if account.password_hash != _hash_password(password):
            account.failed_attempts += 1
            logger.info("Failed sign-in for %s (%d attempts)", email, account.failed_attempts)
            raise WrongPasswordError()
        account.failed_attempts = 0
        return self._issue_token(account)

    def sign_up(self, email: str, password: str) -> tuple[AuthUser, str]:
        email = email.strip().lower()
        if not EMAIL_PATTERN.match(email):
            raise InvalidEmailError()
        if email in self.accounts:
            raise EmailAlreadyInUseError()
        if len(password) < MIN_PASSWORD_LENGTH:
            raise WeakPasswordError()
        account = self._create(email, _hash_password(password))
        logger.info("Created account %s", account.uid)
        return self._issue_token(account)

    def register_google_token(self, google_id_token: str, email: str, display_name: Optional[str] = None) -> None:
        self.google_tokens[google_id_token] = (email.strip().lower(), display_name)

    def sign_in_with_google(self, google_id_token: str) -> tuple[AuthUser, str]:
        if not google_id_token:
            raise SignInCancelledError()
        if google_id_token not in self.google_tokens:
            raise InvalidTokenError()
        email, display_name = self.google_tokens[google_id_token]
        account = self.accounts.get(email)
        if account is None:
            # Federated accounts have no usable password
            account = self._create(email, "", display_name)
        if account.disabled:
            raise UserDisabledError()
        return self._issue_token(account)

    def lookup(self, id_token: str) -> AuthUser:
        uid = self.tokens.get(id_token)
        if uid is None:
            raise InvalidTokenError()
        for account in self.accounts.values():
            if account.uid == uid:
                return AuthUser(uid=account.uid, email=account.email, display_name=account.display_name)
        raise InvalidTokenError()

    def revoke(self, id_token: str) -> None:
        self.tokens.pop(id_token, None)

    def disable(self, email: str) -> None:
        self.accounts[email.strip().lower()].disabled = True
