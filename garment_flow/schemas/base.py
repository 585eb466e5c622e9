from datetime import timezone

from marshmallow import EXCLUDE, fields, pre_load

from garment_flow.extensions import ma
from garment_flow.utils.validators import sanitize_string


class Quantity(fields.Float):
    """Any numeric input, strings from forms included. Whole-number and sign
    checks happen in the repositories; integer columns dump as ints."""

    def _serialize(self, value, attr, obj, **kwargs):
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return super()._serialize(value, attr, obj, **kwargs)


class Reference(fields.Integer):
    """Parent row id. Rejects fractional values instead of truncating them."""

    def _validated(self, value):
        if isinstance(value, float) and not value.is_integer():
            raise self.make_error('invalid', input=value)
        return super()._validated(value)


class Timestamp(fields.DateTime):
    """ISO-8601 with an explicit offset. Stored values are UTC without one, so naive values are tagged UTC on the way out."""

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)


class BaseSchema(ma.Schema):
    sanitize_fields = ()

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def sanitize(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for key in self.sanitize_fields:
            if key in data and data[key]:
                data[key] = sanitize_string(data[key])
        # blank form inputs mean "not given" for numbers and references
        for name, field in self.load_fields.items():
            key = field.data_key or name
            if isinstance(field, (fields.Number, fields.DateTime)) and data.get(key) == '':
                data[key] = None
        return data
