from marshmallow import fields, validate

from garment_flow.schemas.base import BaseSchema, Timestamp


class UserSchema(BaseSchema):
    id = fields.Int(dump_only=True)
    username = fields.Str(required=True, validate=validate.Length(max=100))
    email = fields.Str(allow_none=True, validate=validate.Length(max=200))
    role = fields.Str(allow_none=True, validate=validate.Length(max=30))
    department = fields.Str(allow_none=True, validate=validate.Length(max=100))
    status = fields.Str(allow_none=True, validate=validate.OneOf(['active', 'inactive']))
    created_at = Timestamp(dump_only=True, data_key='createdAt')
    last_login = Timestamp(dump_only=True, data_key='lastLogin')

    sanitize_fields = ('username', 'email', 'role', 'department')
