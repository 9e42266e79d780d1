"""User lookups and the identity providers uploads are attributed through."""
import logging
from typing import Optional, Protocol

import psycopg2

from learning_hub.components.models.video_entry import Actor

logger = logging.getLogger(__name__)


class IdentityProvider(Protocol):
    def get_current_actor(self) -> Optional[Actor]: ...


class UserService:
    """Provides user row operations against a PostgreSQL connection."""

    def __init__(self, conn):
        self._conn = conn

    def create_user(self, firebase_uid: str, username: str) -> str:
        """Insert a user row and return its id as a string."""
        with self._conn.cursor() as cur:
            cur.execute(
                "INSERT INTO users (firebase_uid, username) VALUES (%s, %s) RETURNING id",
                (firebase_uid, username),
            )
            return str(cur.fetchone()[0])

    def find_user_id(self, firebase_uid: str) -> Optional[str]:
        """Return the id of the user with *firebase_uid*, or None."""
        with self._conn.cursor() as cur:
            cur.execute("SELECT id FROM users WHERE firebase_uid = %s", (firebase_uid,))
            row = cur.fetchone()
        return str(row[0]) if row is not None else None


class SessionIdentityProvider:
    """Holds the actor of the current session; empty until someone signs in."""

    def __init__(self, actor: Optional[Actor] = None):
        self._actor = actor

    def sign_in(self, actor_id: str) -> Actor:
        self._actor = Actor(id=actor_id)
        return self._actor

    def sign_out(self) -> None:
        self._actor = None

    def get_current_actor(self) -> Optional[Actor]:
        return self._actor


class AccountIdentityProvider:
    """Resolves the signed-in auth uid to a row in the users table.

    A uid with no matching user, or a lookup that fails, resolves to no actor
    so the caller sees an unauthenticated session rather than a database error.
    """

    def __init__(self, user_service: UserService, firebase_uid: Optional[str] = None):
        self._users = user_service
        self._firebase_uid = firebase_uid

    def get_current_actor(self) -> Optional[Actor]:
        if not self._firebase_uid:
            return None
        try:
            user_id = self._users.find_user_id(self._firebase_uid)
        except psycopg2.Error as exc:
            logger.error(f"Could not resolve user for uid {self._firebase_uid}: {exc}")
            return None
        return Actor(id=user_id) if user_id else None
