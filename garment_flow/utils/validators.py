import math
import re
import bleach

from garment_flow.errors import ValidationError


def sanitize_string(value):
    """Strip HTML tags and trim whitespace from string inputs."""
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    cleaned = bleach.clean(str(value), tags=[], strip=True)
    return cleaned.strip()


EMAIL_REGEX = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


def validate_email(value):
    """Basic email format validation."""
    if not value:
        return None
    if not EMAIL_REGEX.match(value.strip()):
        return 'Invalid email format'
    return None


# ─── Business-rule checks used by the repositories ───

# largest value an INTEGER column holds (signed 64-bit)
MAX_INTEGER = 2 ** 63 - 1


def require_number(value, field):
    """Non-negative finite number. Numeric strings are accepted; returns a float."""
    if value is None or (isinstance(value, str) and value.strip() == ''):
        raise ValidationError(f'{field} is required', field)
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a valid number', field)
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f'{field} must be a valid number', field)
    if math.isnan(num) or math.isinf(num):
        raise ValidationError(f'{field} must be a valid number', field)
    if num < 0:
        raise ValidationError(f'{field} cannot be negative', field)
    return num


def require_integer(value, field):
    num = require_number(value, field)
    if not num.is_integer():
        raise ValidationError(f'{field} must be a whole number', field)
    if num > MAX_INTEGER:
        raise ValidationError(f'{field} is too large', field)
    return int(num)


def require_string(value, field, min_length=1):
    if value is None:
        raise ValidationError(f'{field} is required', field)
    text = str(value).strip()
    if not text:
        raise ValidationError(f'{field} cannot be empty', field)
    if len(text) < min_length:
        raise ValidationError(f'{field} must be at least {min_length} characters', field)
    return text


def require_fields(obj, fields):
    """Fail on the first key of `fields` that is missing or None in `obj`."""
    if not isinstance(obj, dict):
        raise ValidationError('Request body must be an object')
    for field in fields:
        if obj.get(field) is None:
            raise ValidationError(f'Missing required field: {field}', field)
    return True


def require_id(value, label='ID'):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f'{label} must be a positive number', 'id')
    if value > MAX_INTEGER:
        raise ValidationError(f'{label} is too large', 'id')
    return value
