from .user import SignupSchema, LoginSchema, UserIdSchema, UserSchema
from .post import CreatePostSchema, AthleteIdSchema, PostSchema, PostWithFeedbackSchema
from .feedback import (
    CreateFeedbackSchema,
    AcceptFeedbackSchema,
    PostIdSchema,
    FeedbackSchema,
    FeedbackWithCoachInfoSchema,
)

__all__ = [
    "SignupSchema", "LoginSchema", "UserIdSchema", "UserSchema",
    "CreatePostSchema", "AthleteIdSchema", "PostSchema", "PostWithFeedbackSchema",
    "CreateFeedbackSchema", "AcceptFeedbackSchema", "PostIdSchema",
    "FeedbackSchema", "FeedbackWithCoachInfoSchema",
]
