from marshmallow import fields, pre_dump, validate

from coachmarket.extensions import ma

from .base import MAX_INT, InputSchema, id_field


class CreateFeedbackSchema(InputSchema):
    post_id = id_field("postId")
    coach_id = id_field("coachId")
    comment = fields.String(required=True, validate=validate.Length(min=1))
    price_coins = fields.Integer(
        required=True,
        strict=True,
        data_key="priceCoins",
        validate=validate.Range(min=0, max=MAX_INT),
    )


class AcceptFeedbackSchema(InputSchema):
    feedback_id = id_field("feedbackId")
    athlete_id = id_field("athleteId")


class PostIdSchema(InputSchema):
    post_id = id_field("postId")


FEEDBACK_FIELDS = (
    "id", "post_id", "coach_id", "comment", "price_coins", "status", "created_at",
)


class FeedbackSchema(ma.Schema):
    id = fields.Integer()
    post_id = fields.Integer(data_key="postId")
    coach_id = fields.Integer(data_key="coachId")
    comment = fields.String()
    price_coins = fields.Integer(data_key="priceCoins")
    status = fields.String()
    created_at = fields.DateTime(data_key="createdAt")


class CoachInfoSchema(ma.Schema):
    username = fields.String()
    email = fields.String()


class FeedbackWithCoachInfoSchema(FeedbackSchema):
    coach = fields.Nested(CoachInfoSchema)

    @pre_dump
    def flatten(self, item, **kwargs):
        data = {name: getattr(item.feedback, name) for name in FEEDBACK_FIELDS}
        data["coach"] = item.coach
        return data
