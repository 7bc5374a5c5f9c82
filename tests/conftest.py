"""
Pytest fixtures.

Every test gets a fresh application bound to an in-memory SQLite database,
so nothing leaks between tests.
"""
import itertools

import pytest

from coachmarket import create_app
from coachmarket.extensions import db
from coachmarket.models import Feedback, Post, User
from coachmarket.security import hash_password

DEFAULT_PASSWORD = "secret123"


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(session):
    counter = itertools.count(1)

    def _make(role="athlete", coins=0, password=DEFAULT_PASSWORD):
        n = next(counter)
        user = User(
            username=f"{role}{n}",
            email=f"{role}{n}@example.com",
            password_hash=hash_password(password),
            role=role,
            coins=coins,
        )
        session.add(user)
        session.commit()
        return user

    return _make


@pytest.fixture
def athlete(make_user):
    return make_user("athlete", coins=100)


@pytest.fixture
def coach(make_user):
    return make_user("coach", coins=50)


@pytest.fixture
def make_post(session):
    def _make(athlete, description="Squat form check"):
        post = Post(
            athlete_id=athlete.id,
            video_url="https://videos.example.com/squat.mp4",
            description=description,
        )
        session.add(post)
        session.commit()
        return post

    return _make


@pytest.fixture
def post(make_post, athlete):
    return make_post(athlete)


@pytest.fixture
def make_feedback(session):
    def _make(post, coach, price_coins=30, comment="Keep your chest up", status="pending"):
        feedback = Feedback(
            post_id=post.id,
            coach_id=coach.id,
            comment=comment,
            price_coins=price_coins,
            status=status,
        )
        session.add(feedback)
        session.commit()
        return feedback

    return _make
