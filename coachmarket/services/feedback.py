import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coachmarket.errors import (
    ForeignKeyViolation,
    InsufficientFunds,
    InvalidState,
    MarketError,
    NotFound,
    RoleMismatch,
)
from coachmarket.models import Feedback, FeedbackWithCoachInfo, Post, User
from coachmarket.models.feedback import STATUS_ACCEPTED, STATUS_PENDING

logger = logging.getLogger(__name__)


def create_feedback(session: Session, post_id: int, coach_id: int, comment: str, price_coins: int) -> Feedback:
    if session.get(Post, post_id) is None:
        raise ForeignKeyViolation(f"Post {post_id} does not exist")
    coach = session.get(User, coach_id)
    if coach is None:
        raise ForeignKeyViolation(f"Coach {coach_id} does not exist")
    if not coach.is_coach:
        raise RoleMismatch(f"User {coach_id} is not a coach")

    feedback = Feedback(
        post_id=post_id,
        coach_id=coach_id,
        comment=comment,
        price_coins=price_coins,
        status=STATUS_PENDING,
    )
    session.add(feedback)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ForeignKeyViolation(f"Post {post_id} or coach {coach_id} does not exist") from exc

    logger.info("Coach %s offered feedback %s on post %s for %s coins",
                coach_id, feedback.id, post_id, price_coins)
    return feedback


def _locked(session: Session, model, entity_id: int):
    return (
        session.query(model)
        .filter(model.id == entity_id)
        .with_for_update()
        .populate_existing()
        .first()
    )


def accept_feedback(session: Session, feedback_id: int, athlete_id: int) -> Feedback:
    """Accept a pending feedback and pay its coach.

    The feedback row and both user rows are locked for the duration of the
    transaction. Every precondition is checked before anything is written and
    any failure rolls the whole transaction back, so balances and status only
    ever change together.
    """
    try:
        feedback = _locked(session, Feedback, feedback_id)
        if feedback is None:
            raise NotFound("feedback", feedback_id)
        if feedback.status != STATUS_PENDING:
            raise InvalidState(f"Feedback {feedback_id} is not pending (status: {feedback.status})")

        athlete = _locked(session, User, athlete_id)
        if athlete is None:
            raise NotFound("athlete", athlete_id)

        price = feedback.price_coins
        if athlete.coins < price:
            raise InsufficientFunds(athlete.coins, price)

        coach = _locked(session, User, feedback.coach_id)
        if coach is None:
            raise NotFound("coach", feedback.coach_id)

        # guards against a concurrent acceptance on stores without row locks
        updated = (
            session.query(Feedback)
            .filter(Feedback.id == feedback_id, Feedback.status == STATUS_PENDING)
            .update({Feedback.status: STATUS_ACCEPTED}, synchronize_session="fetch")
        )
        if updated != 1:
            raise InvalidState(f"Feedback {feedback_id} is not pending")

        athlete.coins -= price
        coach.coins += price
        session.commit()
    except MarketError as exc:
        session.rollback()
        logger.warning("Acceptance of feedback %s by athlete %s rejected: %s",
                       feedback_id, athlete_id, exc)
        raise
    except Exception:
        session.rollback()
        logger.exception("Acceptance of feedback %s by athlete %s failed", feedback_id, athlete_id)
        raise

    logger.info("Athlete %s accepted feedback %s: %s coins to coach %s",
                athlete_id, feedback_id, price, coach.id)
    return feedback


def get_feedback_by_post(session: Session, post_id: int) -> List[FeedbackWithCoachInfo]:
    rows = (
        session.query(Feedback, User)
        .join(User, Feedback.coach_id == User.id)
        .filter(Feedback.post_id == post_id)
        .order_by(Feedback.id)
        .all()
    )
    return [FeedbackWithCoachInfo(feedback, coach) for feedback, coach in rows]
