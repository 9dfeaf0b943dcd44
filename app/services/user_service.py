# app/services/user_service.py
from sqlmodel import Session

from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.user import UserUpdate


class UserService:
    """
    Business logic for User.

    Responsibilities:
      - keep profiles in sync with the auth provider's claims
      - apply self-service profile edits
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    def sync_from_claims(self, session: Session, claims: dict) -> User:
        """
        Upsert the caller's profile from verified token claims.

        Only claims that are present are written, so a token without
        a profile picture does not erase one the user set themselves.
        """
        fields = {
            key: claims[key]
            for key in ("email", "first_name", "last_name", "profile_image_url")
            if claims.get(key)
        }
        return self.repo.upsert(session, claims["sub"], **fields)

    def get_me(self, current_user: User) -> User:
        """Return the current authenticated user."""
        return current_user

    def update_me(
        self,
        session: Session,
        current_user: User,
        payload: UserUpdate,
    ) -> User:
        """Partial update for profile edits; unset fields are left alone."""
        updates = payload.model_dump(exclude_unset=True)
        if "interests" in updates and updates["interests"] is None:
            updates["interests"] = []
        if not updates:
            return current_user
        return self.repo.update(session, current_user, updates)
