from .users import signup, login, get_user_by_id
from .posts import create_post, get_all_posts, get_posts_by_athlete
from .feedback import create_feedback, accept_feedback, get_feedback_by_post

__all__ = [
    "signup", "login", "get_user_by_id",
    "create_post", "get_all_posts", "get_posts_by_athlete",
    "create_feedback", "accept_feedback", "get_feedback_by_post",
]
