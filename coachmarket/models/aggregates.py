"""Read-side shapes returned by the listing handlers."""
from typing import List, NamedTuple

from .feedback import Feedback
from .post import Post
from .user import User


class PostWithFeedback(NamedTuple):
    post: Post
    feedback: List[Feedback]


class FeedbackWithCoachInfo(NamedTuple):
    feedback: Feedback
    coach: User
