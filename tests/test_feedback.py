"""Tests for feedback creation and the per-post feedback listing."""
import pytest

from coachmarket.errors import ForeignKeyViolation, RoleMismatch
from coachmarket.models import Feedback
from coachmarket.services import create_feedback, get_feedback_by_post


class TestCreateFeedback:

    def test_creates_pending_feedback(self, session, post, coach):
        feedback = create_feedback(session, post.id, coach.id, "Brace harder", 25)

        assert feedback.id is not None
        assert feedback.post_id == post.id
        assert feedback.coach_id == coach.id
        assert feedback.comment == "Brace harder"
        assert feedback.price_coins == 25
        assert feedback.status == "pending"
        assert feedback.created_at is not None

    def test_free_feedback_allowed(self, session, post, coach):
        feedback = create_feedback(session, post.id, coach.id, "Looks good", 0)

        assert feedback.price_coins == 0

    def test_unknown_post(self, session, coach):
        with pytest.raises(ForeignKeyViolation, match="Post"):
            create_feedback(session, 9999, coach.id, "Brace harder", 25)
        assert session.query(Feedback).count() == 0

    def test_unknown_coach(self, session, post):
        with pytest.raises(ForeignKeyViolation, match="Coach"):
            create_feedback(session, post.id, 9999, "Brace harder", 25)
        assert session.query(Feedback).count() == 0

    def test_athlete_cannot_give_feedback(self, session, post, athlete):
        with pytest.raises(RoleMismatch):
            create_feedback(session, post.id, athlete.id, "Brace harder", 25)
        assert session.query(Feedback).count() == 0


class TestGetFeedbackByPost:

    def test_none(self, session, post):
        assert get_feedback_by_post(session, post.id) == []

    def test_includes_coach_info(self, session, post, coach, make_user, make_post, make_feedback):
        other_coach = make_user("coach")
        fb1 = make_feedback(post, coach)
        fb2 = make_feedback(post, other_coach)
        make_feedback(make_post(post.athlete), coach)

        results = get_feedback_by_post(session, post.id)

        assert [r.feedback.id for r in results] == [fb1.id, fb2.id]
        assert results[0].coach.username == coach.username
        assert results[0].coach.email == coach.email
        assert results[1].coach.username == other_coach.username
