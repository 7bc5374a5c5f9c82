import logging
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coachmarket.errors import ForeignKeyViolation, RoleMismatch
from coachmarket.models import Feedback, Post, PostWithFeedback, User

logger = logging.getLogger(__name__)


def create_post(session: Session, athlete_id: int, video_url: str, description: str) -> Post:
    athlete = session.get(User, athlete_id)
    if athlete is None:
        raise ForeignKeyViolation(f"Athlete {athlete_id} does not exist")
    if not athlete.is_athlete:
        raise RoleMismatch(f"User {athlete_id} is not an athlete")

    post = Post(athlete_id=athlete_id, video_url=video_url, description=description)
    session.add(post)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ForeignKeyViolation(f"Athlete {athlete_id} does not exist") from exc

    logger.info("Athlete %s created post %s", athlete_id, post.id)
    return post


def get_all_posts(session: Session) -> List[PostWithFeedback]:
    """Every post with its feedback, both in insertion order."""
    rows = (
        session.query(Post, Feedback)
        .outerjoin(Feedback, Feedback.post_id == Post.id)
        .order_by(Post.id, Feedback.id)
        .all()
    )

    grouped = {}
    for post, feedback in rows:
        entry = grouped.setdefault(post.id, PostWithFeedback(post, []))
        if feedback is not None:
            entry.feedback.append(feedback)
    return list(grouped.values())


def get_posts_by_athlete(session: Session, athlete_id: int) -> List[PostWithFeedback]:
    posts = (
        session.query(Post)
        .filter(Post.athlete_id == athlete_id)
        .order_by(Post.id)
        .all()
    )

    results = []
    for post in posts:
        feedback = (
            session.query(Feedback)
            .filter(Feedback.post_id == post.id)
            .order_by(Feedback.id)
            .all()
        )
        results.append(PostWithFeedback(post, feedback))
    return results
