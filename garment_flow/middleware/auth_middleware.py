"""Request actor for the API.

Sessions and logins belong to whatever sits in front of this service. Routes
only see an opaque actor on ``g.actor``: who is calling and with what role.
"""
from collections import namedtuple
from functools import wraps
from flask import request, g, current_app
from garment_flow.utils.responses import error_response

Actor = namedtuple('Actor', ['user_id', 'user_name', 'role'])

# used while AUTH_ENABLED is off; headers may still override it
DEV_ACTOR = Actor('1', 'DevUser', 'admin')


def _actor_from_headers(default):
    return Actor(
        user_id=request.headers.get('X-User-Id', default.user_id),
        user_name=request.headers.get('X-User-Name', default.user_name),
        role=request.headers.get('X-User-Role', default.role),
    )


def _bearer_token():
    auth_header = request.headers.get('Authorization', '')
    if not auth_header.startswith('Bearer '):
        return ''
    return auth_header[len('Bearer '):].strip()


def token_required(f):
    """Resolve the actor for this request, or answer 401."""
    @wraps(f)
    def decorated(*args, **kwargs):
        if not current_app.config.get('AUTH_ENABLED', False):
            g.actor = _actor_from_headers(DEV_ACTOR)
            return f(*args, **kwargs)

        token = _bearer_token()
        if not token or token != current_app.config.get('API_SECRET_TOKEN'):
            return error_response('Unauthorized - Invalid or missing token', 401)
        if not request.headers.get('X-User-Id'):
            return error_response('Unauthorized - X-User-Id header required', 401)

        g.actor = _actor_from_headers(Actor(None, 'Unknown', 'user'))
        return f(*args, **kwargs)
    return decorated


def role_required(*allowed_roles):
    """Gate a route on the actor's role. Use below token_required."""
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            role = g.actor.role
            if role not in allowed_roles:
                current_app.logger.warning(f'Actor {g.actor.user_id} with role "{role}" denied {request.path}')
                return error_response(f'Forbidden - requires role: {", ".join(allowed_roles)}', 403)
            return f(*args, **kwargs)
        return decorated
    return decorator
