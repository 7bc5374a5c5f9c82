from marshmallow import fields, pre_dump, validate

from coachmarket.extensions import ma

from .base import InputSchema, id_field
from .feedback import FeedbackSchema


class CreatePostSchema(InputSchema):
    athlete_id = id_field("athleteId")
    video_url = fields.URL(required=True, data_key="videoUrl")
    description = fields.String(required=True, validate=validate.Length(min=1))


class AthleteIdSchema(InputSchema):
    athlete_id = id_field("athleteId")


POST_FIELDS = ("id", "athlete_id", "video_url", "description", "created_at")


class PostSchema(ma.Schema):
    id = fields.Integer()
    athlete_id = fields.Integer(data_key="athleteId")
    video_url = fields.String(data_key="videoUrl")
    description = fields.String()
    created_at = fields.DateTime(data_key="createdAt")


class PostWithFeedbackSchema(PostSchema):
    feedback = fields.List(fields.Nested(FeedbackSchema))

    @pre_dump
    def flatten(self, item, **kwargs):
        data = {name: getattr(item.post, name) for name in POST_FIELDS}
        data["feedback"] = list(item.feedback)
        return data
