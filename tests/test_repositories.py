"""Data access layer behavior exercised directly against a session."""
from datetime import date

from app.models.travel_plan import TravelPlan
from app.repositories.message_repo import MessageRepository
from app.repositories.travel_plan_repo import TravelPlanRepository
from app.repositories.user_repo import UserRepository
from app.schemas.common import normalize_interests

users = UserRepository()
plans = TravelPlanRepository()
messages = MessageRepository()


def make_plan(session, user_id, destination, start, end) -> TravelPlan:
    return plans.create(
        session,
        TravelPlan(
            user_id=user_id,
            destination=destination,
            start_date=start,
            end_date=end,
        ),
    )


def test_upsert_without_changes_keeps_updated_at(session):
    user = users.upsert(session, "u1", email="u1@example.com")
    stamp = user.updated_at

    again = users.upsert(session, "u1", email="u1@example.com")
    assert again.updated_at == stamp


def test_missing_rows_return_none(session):
    assert users.get_by_id(session, "nope") is None
    assert plans.get_by_id(session, "nope") is None
    assert plans.soft_delete(session, "nope") is False
    assert messages.mark_read(session, "nope") is False
    assert messages.list_for_user(session, "nope") == []


def test_search_date_overlap(session):
    users.upsert(session, "u1")
    march = make_plan(session, "u1", "Lisbon", date(2025, 3, 1), date(2025, 3, 10))
    make_plan(session, "u1", "Porto", date(2025, 5, 1), date(2025, 5, 3))

    rows = plans.search_active(
        session, start_date=date(2025, 3, 10), end_date=date(2025, 4, 1)
    )
    assert [plan.id for plan, _ in rows] == [march.id]


def test_search_excludes_inactive_and_requester(session):
    users.upsert(session, "u1")
    users.upsert(session, "u2")
    hidden = make_plan(session, "u1", "Lisbon", date(2025, 3, 1), date(2025, 3, 2))
    plans.soft_delete(session, hidden.id)
    make_plan(session, "u2", "Porto", date(2025, 3, 1), date(2025, 3, 2))

    rows = plans.search_active(session, exclude_user_id="u2")
    assert rows == []


def test_normalize_interests_keeps_first_spelling():
    assert normalize_interests([" Food", "food", "", "Art"]) == ["Food", "Art"]
    assert normalize_interests(None) == []
