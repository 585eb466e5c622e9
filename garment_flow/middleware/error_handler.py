import traceback
from flask import jsonify, current_app
from marshmallow import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from werkzeug.exceptions import HTTPException

from garment_flow.errors import AppError
from garment_flow.services.repository import translate_store_error
from garment_flow.utils.responses import validation_error


def register_error_handlers(app):

    @app.errorhandler(AppError)
    def app_error(e):
        if e.status_code >= 500:
            current_app.logger.error(f'{type(e).__name__}: {e.message}')
        else:
            current_app.logger.warning(f'Controlled error: {e.message} (status {e.status_code})')
        response = jsonify(e.to_dict())
        if e.retryable:
            response.headers['Retry-After'] = '1'
        return response, e.status_code

    @app.errorhandler(SchemaValidationError)
    def schema_validation_error(e):
        current_app.logger.warning(f'Validation error: {e.messages}')
        return validation_error(e.messages)

    @app.errorhandler(IntegrityError)
    @app.errorhandler(OperationalError)
    def db_error(e):
        from garment_flow.extensions import db
        db.session.rollback()
        current_app.logger.error(f'{type(e).__name__}: {str(e)}')
        return app_error(translate_store_error(e, 'database operation'))

    @app.errorhandler(HTTPException)
    def http_error(e):
        messages = {
            401: 'Unauthorized',
            403: 'Forbidden',
            404: 'Resource not found',
            405: 'Method not allowed',
            413: 'Request entity too large',
            429: 'Rate limit exceeded. Please slow down.',
        }
        message = messages.get(e.code) or (str(e.description) if e.description else e.name)
        return jsonify({
            'success': False,
            'message': message,
            'errors': [],
        }), e.code

    @app.errorhandler(Exception)
    def unhandled_exception(e):
        from garment_flow.extensions import db
        db.session.rollback()
        current_app.logger.error(f'Unhandled Exception: {str(e)}\n{traceback.format_exc()}')
        return jsonify({
            'success': False,
            'message': 'An unexpected error occurred. Please try again later.',
            'error_code': 'ERR_500',
            'errors': [],
        }), 500
