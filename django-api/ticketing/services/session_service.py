"""Session service - the signed-in user and session token for one client.

Credential verification belongs to an IdentityProvider. The bundled
MockIdentityProvider accepts any credentials; a deployment that needs real
authentication must supply its own provider.
"""

import logging
import uuid
from abc import ABC, abstractmethod
from urllib.parse import quote_plus

from ticketing import conf, signals
from ticketing.domain import User
from ticketing.domain.errors import NotAuthenticatedError
from ticketing.stores.record_store import (
    AUTH_TOKEN_CODEC,
    AUTH_TOKEN_KEY,
    USER_CODEC,
    USER_KEY,
    RecordStore,
)

logger = logging.getLogger(__name__)

PROFILE_FIELDS = frozenset({"name", "email", "avatar"})


def avatar_url(name: str) -> str:
    template = conf.get("TICKETING_AVATAR_URL_TEMPLATE")
    return template.format(name=quote_plus(name))


class IdentityProvider(ABC):
    """Resolves credentials to a user and issues session tokens."""

    @abstractmethod
    def signin(self, email: str, password: str) -> User:
        ...

    @abstractmethod
    def signup(self, name: str, email: str, password: str) -> User:
        ...

    @abstractmethod
    def issue_token(self, user: User) -> str:
        ...


class MockIdentityProvider(IdentityProvider):
    """Always succeeds. Passwords are ignored."""

    def signin(self, email: str, password: str) -> User:
        name = conf.get("TICKETING_DEFAULT_DISPLAY_NAME")
        return User(id=uuid.uuid4().hex, name=name, email=email, avatar=avatar_url(name))

    def signup(self, name: str, email: str, password: str) -> User:
        return User(id=uuid.uuid4().hex, name=name, email=email, avatar=avatar_url(name))

    def issue_token(self, user: User) -> str:
        return f"mock-token-{uuid.uuid4().hex}"


class SessionService:
    """Holds the current user and token, mirrored to the store."""

    def __init__(self, store: RecordStore, identity: IdentityProvider | None = None) -> None:
        self._store = store
        self._identity = identity or MockIdentityProvider()
        self._user: User | None = None
        self._token: str | None = None
        self.load()

    def load(self) -> None:
        """Re-hydrate the session from the store."""
        self._user = self._store.read(USER_KEY, USER_CODEC)
        self._token = self._store.read(AUTH_TOKEN_KEY, AUTH_TOKEN_CODEC)
        if (self._user is None) != (self._token is None):
            logger.info("Stored session is incomplete; treating client as signed out")

    def _persist(self) -> None:
        if self._user is not None:
            self._store.write(USER_KEY, self._user, USER_CODEC)
        else:
            self._store.clear(USER_KEY)

        if self._token is not None:
            self._store.write(AUTH_TOKEN_KEY, self._token, AUTH_TOKEN_CODEC)
        else:
            self._store.clear(AUTH_TOKEN_KEY)

    def _start(self, user: User, created: bool) -> User:
        self._user = user
        self._token = self._identity.issue_token(user)
        self._persist()
        logger.info("Session started for %s", user.email)
        signals.session_started.send(sender=self.__class__, user=user, created=created)
        return user

    def signin(self, email: str, password: str) -> User:
        return self._start(self._identity.signin(email, password), created=False)

    def signup(self, name: str, email: str, password: str) -> User:
        return self._start(self._identity.signup(name, email, password), created=True)

    def signout(self) -> None:
        self._user = None
        self._token = None
        self._persist()
        signals.session_ended.send(sender=self.__class__)

    def get_user(self) -> User | None:
        return self._user

    def get_auth_token(self) -> str | None:
        return self._token

    def is_authenticated(self) -> bool:
        return self._user is not None and self._token is not None

    def current_user_id(self) -> str | None:
        return self._user.id if self.is_authenticated() else None

    def update_profile(self, **fields) -> User:
        """Merge name, email or avatar into the current user.

        Raises:
            NotAuthenticatedError: If there is no current session.
            ValueError: If a field other than name, email or avatar is given.
        """
        if not self.is_authenticated():
            raise NotAuthenticatedError()

        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update profile fields: {', '.join(sorted(unknown))}")

        self._user = self._user.merged(**fields)
        self._store.write(USER_KEY, self._user, USER_CODEC)
        signals.profile_updated.send(sender=self.__class__, user=self._user)
        return self._user
