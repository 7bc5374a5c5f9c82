from marshmallow import EXCLUDE, fields, validate

from coachmarket.extensions import ma

# integer columns are int4 on Postgres
MAX_INT = 2**31 - 1


class InputSchema(ma.Schema):
    """Base for procedure inputs; unknown keys are dropped, not rejected."""

    class Meta:
        unknown = EXCLUDE


def id_field(data_key, **kwargs):
    return fields.Integer(
        required=True,
        strict=True,
        data_key=data_key,
        validate=validate.Range(min=1, max=MAX_INT),
        **kwargs
    )
