# app/services/match_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import Settings, get_settings
from app.models.match import Match
from app.repositories.match_repo import MatchRepository
from app.schemas.match import MatchCreate

logger = logging.getLogger(__name__)


class MatchService:
    """
    Business logic for matches.

    A match always starts as 'pending'. Status transitions
    (pending -> accepted / rejected) are not handled here.
    """

    def __init__(self, repo: MatchRepository, settings: Settings | None = None):
        self.repo = repo
        self.settings = settings or get_settings()

    def list_matches(self, session: Session, user_id: str) -> list[Match]:
        """Matches where the user is on either side, newest first."""
        return self.repo.list_for_user(session, user_id)

    def create_match(
        self,
        session: Session,
        user_id: str,
        payload: MatchCreate,
    ) -> Match:
        """
        Record a pending match proposed by `user_id`.

        Referenced users and plans are only checked by the storage
        layer's foreign keys.

        Raises:
            HTTPException(409): a match for the same pair of plans exists
                and ALLOW_DUPLICATE_MATCHES is off.
        """
        if not self.settings.ALLOW_DUPLICATE_MATCHES:
            existing = self.repo.find_for_plans(
                session, payload.travel_plan_one_id, payload.travel_plan_two_id
            )
            if existing is not None:
                raise HTTPException(
                    status_code=status.HTTP_409_CONFLICT,
                    detail="A match for these travel plans already exists",
                )

        match = Match(
            user_one_id=user_id,
            user_two_id=payload.user_two_id,
            travel_plan_one_id=payload.travel_plan_one_id,
            travel_plan_two_id=payload.travel_plan_two_id,
            status="pending",
        )
        match = self.repo.create(session, match)
        logger.info("Match %s proposed by user %s", match.id, user_id)
        return match
