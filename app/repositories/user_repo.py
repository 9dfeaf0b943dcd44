# app/repositories/user_repo.py
from datetime import datetime, timezone
from typing import Any

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """
    Data access layer for User.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, user_id: str) -> User | None:
        """Return a User by primary key, or None if not found."""
        return session.get(User, user_id)

    def get_by_email(self, session: Session, email: str) -> User | None:
        """Return a User by unique email, or None if not found."""
        stmt = select(User).where(User.email == email)
        return session.exec(stmt).first()

    def create(self, session: Session, user: User) -> User:
        """Insert a new User and return the persisted row."""
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    def update(self, session: Session, user: User, updates: dict[str, Any]) -> User:
        """Apply field updates to an existing User and stamp updated_at."""
        for key, value in updates.items():
            setattr(user, key, value)
        user.updated_at = datetime.now(timezone.utc)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    def upsert(self, session: Session, user_id: str, **fields: Any) -> User:
        """
        Insert the user if missing, otherwise refresh the given fields.

        Nothing is written when an existing row already holds the same
        values, so repeated logins do not churn updated_at.
        """
        user = self.get_by_id(session, user_id)
        if user is None:
            return self.create(session, User(id=user_id, **fields))

        changed = {
            key: value
            for key, value in fields.items()
            if getattr(user, key) != value
        }
        if not changed:
            return user
        return self.update(session, user, changed)
