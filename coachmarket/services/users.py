import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from coachmarket.errors import Conflict, RoleMismatch
from coachmarket.models import User
from coachmarket.models.user import USER_ROLES
from coachmarket.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def _conflict_message(session: Session, username: str, email: str) -> str:
    if session.query(User).filter_by(username=username).first():
        return f"Username '{username}' is already taken"
    if session.query(User).filter_by(email=email).first():
        return f"Email '{email}' is already registered"
    return "Username or email is already taken"


def signup(session: Session, username: str, email: str, password: str, role: str) -> User:
    if role not in USER_ROLES:
        raise RoleMismatch(f"Unknown role '{role}'")

    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        role=role,
        coins=0,
    )
    session.add(user)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise Conflict(_conflict_message(session, username, email)) from exc

    logger.info("Signed up %s %s (id=%s)", role, username, user.id)
    return user


def login(session: Session, email: str, password: str) -> Optional[User]:
    """Return the user for valid credentials, ``None`` otherwise."""
    user = session.query(User).filter_by(email=email).first()
    if not user:
        logger.info("Login failed: no user with email %s", email)
        return None

    if not verify_password(password, user.password_hash):
        logger.info("Login failed: incorrect password for user %s", user.id)
        return None

    return user


def get_user_by_id(session: Session, user_id: int) -> Optional[User]:
    return session.get(User, user_id)
