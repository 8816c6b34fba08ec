"""Sign-in flows and session lookup."""

import logging
import time
from typing import Callable, Optional

from auth.errors import AuthError, InvalidTokenError
from auth.identity import IdentityProvider
from auth.models import AuthSession, AuthUser
from content.users import UserService
from feeds.cache import CacheEntry

logger = logging.getLogger(__name__)

# Tokens are re-verified with the provider at least this often.
SESSION_TTL_SECONDS = 300


class AuthService:
    """Wraps an identity provider and attaches role records to sessions.

    Verified tokens are remembered for ``session_ttl_seconds`` so repeated
    requests don't go back to the provider; after that the provider is asked
    again, so expired or revoked tokens stop working. The role is re-read
    from the store on every lookup so role changes apply immediately.
    """

    def __init__(
        self,
        provider: IdentityProvider,
        user_service: UserService,
        session_ttl_seconds: float = SESSION_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.provider = provider
        self.user_service = user_service
        self.session_ttl_seconds = session_ttl_seconds
        self.clock = clock
        self.sessions: dict[str, CacheEntry[AuthUser]] = {}

    def _remember(self, token: str, user: AuthUser) -> None:
        now = self.clock()
        expired = [t for t, entry in self.sessions.items() if now - entry.fetched_at >= self.session_ttl_seconds]
        for stale in expired:
            del self.sessions[stale]
        self.sessions[token] = CacheEntry(value=user, fetched_at=now)

    def _remembered(self, token: str) -> Optional[AuthUser]:
        entry = self.sessions.get(token)
        if entry is None:
            return None
        if self.clock() - entry.fetched_at >= self.session_ttl_seconds:
            del self.sessions[token]
            return None
        return entry.value

    def _start_session(self, sign_in: Callable[[], tuple[AuthUser, str]]) -> AuthSession:
        user, token = sign_in()
        self._remember(token, user)
        role = self.user_service.get_role(user.uid)
        logger.info("Signed in %s as %s", user.uid, role.role.value)
        return AuthSession(user=user, role=role, id_token=token)

    def sign_in(self, email: str, password: str) -> AuthSession:
        return self._start_session(lambda: self.provider.sign_in(email, password))

    def sign_up(self, email: str, password: str) -> AuthSession:
        return self._start_session(lambda: self.provider.sign_up(email, password))

    def sign_in_with_google(self, google_id_token: str) -> AuthSession:
        return self._start_session(lambda: self.provider.sign_in_with_google(google_id_token))

    def sign_out(self, id_token: str) -> None:
        self.sessions.pop(id_token, None)
        revoke = getattr(self.provider, "revoke", None)
        if revoke is not None:
            revoke(id_token)

    def current_session(self, id_token: Optional[str]) -> Optional[AuthSession]:
        """Session for a bearer token, or None when signed out or the token is invalid."""
        if not id_token:
            return None
        user = self._remembered(id_token)
        if user is None:
            try:
                user = self.provider.lookup(id_token)
            except InvalidTokenError:
                return None
            except AuthError as e:
                logger.warning("Session lookup failed: %s", e)
                return None
            self._remember(id_token, user)
        role = self.user_service.get_role(user.uid)
        return AuthSession(user=user, role=role, id_token=id_token)
