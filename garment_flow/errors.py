"""Typed errors raised by the validation layer and the repositories."""


class AppError(Exception):
    """Base for controlled errors. `message` is always safe to show a client."""

    status_code = 500
    retryable = False

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {'success': False, 'message': self.message, 'errors': []}


class ValidationError(AppError):
    status_code = 400

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field

    def to_dict(self):
        payload = super().to_dict()
        if self.field:
            payload['errors'] = [{'field': self.field, 'message': self.message}]
        return payload


class ConflictError(AppError):
    status_code = 409


class InvalidReferenceError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class TransientStoreError(AppError):
    """Engine busy, locked or unreachable. The same call may succeed later."""

    status_code = 503
    retryable = True


class FatalStoreError(AppError):
    status_code = 500
