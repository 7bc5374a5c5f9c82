from .user import User
from .post import Post
from .feedback import Feedback
from .aggregates import PostWithFeedback, FeedbackWithCoachInfo

__all__ = [
    "User", "Post", "Feedback",
    "PostWithFeedback", "FeedbackWithCoachInfo",
]
