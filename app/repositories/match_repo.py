# app/repositories/match_repo.py
from sqlalchemy import and_, or_
from sqlmodel import Session, select

from app.models.match import Match


class MatchRepository:

    def list_for_user(self, session: Session, user_id: str) -> list[Match]:
        stmt = (
            select(Match)
            .where(or_(Match.user_one_id == user_id, Match.user_two_id == user_id))
            .order_by(Match.created_at.desc())
        )
        return session.exec(stmt).all()

    def find_for_plans(
        self,
        session: Session,
        plan_one_id: str,
        plan_two_id: str,
    ) -> Match | None:
        """Return an existing match between two plans, in either orientation."""
        stmt = select(Match).where(
            or_(
                and_(
                    Match.travel_plan_one_id == plan_one_id,
                    Match.travel_plan_two_id == plan_two_id,
                ),
                and_(
                    Match.travel_plan_one_id == plan_two_id,
                    Match.travel_plan_two_id == plan_one_id,
                ),
            )
        )
        return session.exec(stmt).first()

    def create(self, session: Session, match: Match) -> Match:
        session.add(match)
        session.commit()
        session.refresh(match)
        return match
