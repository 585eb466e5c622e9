import os
import logging
from logging.handlers import RotatingFileHandler
from flask import Flask, jsonify
from dotenv import load_dotenv
from sqlalchemy.exc import SQLAlchemyError

from garment_flow.config import config
from garment_flow.extensions import db, ma, cors, limiter
from garment_flow.persistence import configure_database, SnapshotWriter
from garment_flow.services.store import PipelineStore, EXTENSION_KEY

__version__ = '1.0.0'


def create_app(config_name=None, overrides=None):
    load_dotenv()

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config.get(config_name, config['default']))
    if overrides:
        app.config.update(overrides)

    # Setup logging
    _setup_logging(app)

    # Database location has to be known before the engine is built
    snapshot_path = configure_database(app)

    # Initialize extensions
    db.init_app(app)
    ma.init_app(app)
    cors.init_app(app, origins=app.config.get('CORS_ORIGINS', ['*']),
                  allow_headers=['Content-Type', 'Authorization',
                                 'X-User-Id', 'X-User-Name', 'X-User-Role'],
                  methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'])
    limiter.init_app(app)

    with app.app_context():
        writer = None
        if snapshot_path:
            writer = SnapshotWriter(db.engine, snapshot_path, app.config.get('SNAPSHOT_INTERVAL', 5.0))
            writer.load()
        db.create_all()
        if writer:
            writer.start()
            app.extensions['snapshot_writer'] = writer

        store = PipelineStore(db.session)
        app.extensions[EXTENSION_KEY] = store

        if app.config.get('SEED_ON_STARTUP'):
            from garment_flow.services.seed_service import seed_pipeline
            seed_pipeline(store)

    # Register error handlers and request logging
    from garment_flow.middleware.error_handler import register_error_handlers
    from garment_flow.middleware.request_logging import register_request_logging
    register_error_handlers(app)
    register_request_logging(app)

    # Security headers
    @app.after_request
    def add_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Cache-Control'] = 'no-store'
        return response

    # Health check (no auth)
    @app.route('/api/health', methods=['GET'])
    def health_check():
        db_status = 'connected'
        try:
            db.session.execute(db.text('SELECT 1'))
        except SQLAlchemyError as e:
            db.session.rollback()
            app.logger.error(f'Health check failed: {e}')
            db_status = 'disconnected'
        return jsonify({
            'status': 'ok' if db_status == 'connected' else 'degraded',
            'database': db_status,
            'mode': 'snapshot' if snapshot_path else 'file',
            'version': __version__,
            'environment': config_name,
        })

    # Register blueprints
    _register_blueprints(app)

    return app


def _register_blueprints(app):
    from garment_flow.routes.yarn_routes import yarn_bp
    from garment_flow.routes.stage_routes import stage_bp
    from garment_flow.routes.cost_routes import cost_bp
    from garment_flow.routes.user_routes import user_bp
    from garment_flow.routes.dashboard_routes import dashboard_bp

    app.register_blueprint(yarn_bp, url_prefix='/api')
    app.register_blueprint(stage_bp, url_prefix='/api')
    app.register_blueprint(cost_bp, url_prefix='/api')
    app.register_blueprint(user_bp, url_prefix='/api')
    app.register_blueprint(dashboard_bp, url_prefix='/api')


def _setup_logging(app):
    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)
    log_file = os.path.abspath(app.config.get('LOG_FILE', './logs/server.log'))

    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    # app.logger is the 'garment_flow' logger, so module loggers below it propagate here
    for existing in app.logger.handlers:
        if isinstance(existing, RotatingFileHandler) and existing.baseFilename == log_file:
            break
    else:
        handler = RotatingFileHandler(log_file, maxBytes=10_000_000, backupCount=5)
        handler.setLevel(log_level)
        formatter = logging.Formatter('[%(asctime)s] %(levelname)s in %(module)s: %(message)s')
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
    app.logger.setLevel(log_level)
