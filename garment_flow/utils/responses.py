from flask import jsonify


def json_response(data, status_code=200):
    """Plain JSON body: a record, a list of records or a stats object."""
    return jsonify(data), status_code


def empty_response(status_code=204):
    return '', status_code


def error_response(message='An error occurred', status_code=400, errors=None):
    """Standard error response."""
    return jsonify({
        'success': False,
        'message': message,
        'errors': errors or [],
    }), status_code


def validation_error(errors, message=None):
    """Validation error with field-level errors. The message names the first offending field."""
    formatted = []
    if isinstance(errors, dict):
        for field, msgs in errors.items():
            if isinstance(msgs, list):
                for msg in msgs:
                    formatted.append({'field': field, 'message': msg})
            else:
                formatted.append({'field': field, 'message': str(msgs)})
    elif isinstance(errors, list):
        formatted = [{'field': '_schema', 'message': str(msg)} for msg in errors]
    if message is None:
        message = (f"Validation error in {formatted[0]['field']}: {formatted[0]['message']}"
                   if formatted else 'Validation failed')
    return jsonify({
        'success': False,
        'message': message,
        'errors': formatted,
    }), 400
