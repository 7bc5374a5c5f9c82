from marshmallow import fields, validate

from coachmarket.extensions import ma
from coachmarket.models.user import USER_ROLES

from .base import InputSchema, id_field


class SignupSchema(InputSchema):
    username = fields.String(required=True, validate=validate.Length(min=3, max=50))
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6))
    role = fields.String(required=True, validate=validate.OneOf(USER_ROLES))


class LoginSchema(InputSchema):
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)


class UserIdSchema(InputSchema):
    user_id = id_field("userId")


class UserSchema(ma.Schema):
    id = fields.Integer()
    username = fields.String()
    email = fields.String()
    password_hash = fields.String(data_key="passwordHash")
    role = fields.String()
    coins = fields.Integer()
    created_at = fields.DateTime(data_key="createdAt")
