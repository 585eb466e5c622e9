from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from garment_flow.errors import ValidationError
from garment_flow.models import User
from garment_flow.services.repository import Repository, Rule, optional_text, optional_timestamp
from garment_flow.utils.validators import require_fields, require_string, validate_email


def _email(value, field):
    email = optional_text(value, field)
    if email:
        error = validate_email(email)
        if error:
            raise ValidationError(error, field)
        email = email.lower()
    return email


class UserRepository(Repository):
    model = User
    label = 'user'
    plural = 'users'
    order_by = 'created_at'
    unique_fields = (('username', 'Username'), ('email', 'Email'))
    rules = (
        Rule('username', 'Username', require_string, True),
        Rule('email', 'Email', _email, False),
        Rule('role', 'Role', optional_text, False),
        Rule('department', 'Department', optional_text, False),
        Rule('status', 'Status', optional_text, False),
        Rule('last_login', 'Last Login', optional_timestamp, False),
    )

    def get_by_username(self, username):
        username = require_string(username, 'Username')
        try:
            return self.session.execute(
                select(User).where(User.username == username)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._fail(e, 'fetching user by username')

    def create(self, data):
        require_fields(data, ('username',))
        return super().create(data)

    def record_login(self, id):
        """Stamp last_login. Called by the sign-in flow that fronts this service, not by profile edits."""
        return self.update(id, {'last_login': datetime.now(timezone.utc)})

    def describe(self, values):
        return values.get('username', '')
