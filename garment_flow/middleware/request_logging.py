import time
from flask import g, request, current_app


def register_request_logging(app):
    """Log METHOD /path STATUS in Nms for every /api request."""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        if request.path.startswith('/api'):
            started = g.get('request_started')
            duration = int((time.perf_counter() - started) * 1000) if started else 0
            current_app.logger.info(f'{request.method} {request.path} {response.status_code} in {duration}ms')
        return response
