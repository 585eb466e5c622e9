import os


def _database_url():
    """Full DATABASE_URL when provided; otherwise resolved from DATABASE_MODE at startup."""
    return os.environ.get('DATABASE_URL') or None


def _get_engine_options(url, pool_size=None, max_overflow=None):
    """SQLite needs no pool tuning; client-server engines get pre-ping and recycling."""
    if not url or url.startswith('sqlite'):
        return {}
    options = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }
    if pool_size:
        options['pool_size'] = pool_size
    if max_overflow:
        options['max_overflow'] = max_overflow
    return options


class BaseConfig:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB JSON bodies
    API_SECRET_TOKEN = os.environ.get('API_SECRET_TOKEN', 'local-dev-token')
    AUTH_ENABLED = os.environ.get('AUTH_ENABLED', 'false').lower() in ('true', '1', 'yes')
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://localhost:5000').split(',')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE', './logs/server.log')

    # Storage: 'file' writes straight to DATA_DIR/garment-flow.db,
    # 'snapshot' keeps the database in memory and flushes it every SNAPSHOT_INTERVAL seconds
    DATA_DIR = os.environ.get('DATA_DIR', './data')
    DATABASE_MODE = os.environ.get('DATABASE_MODE', 'file')
    SNAPSHOT_INTERVAL = float(os.environ.get('SNAPSHOT_INTERVAL', '5'))
    SEED_ON_STARTUP = os.environ.get('SEED_ON_STARTUP', 'false').lower() in ('true', '1', 'yes')

    # Rate limiting
    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = "300/minute"
    RATELIMIT_STORAGE_URI = "memory://"


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = _get_engine_options(_database_url())


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = _database_url()
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL', 'memory://')
    SQLALCHEMY_ENGINE_OPTIONS = _get_engine_options(_database_url(), pool_size=5, max_overflow=10)


class TestingConfig(BaseConfig):
    """In-memory SQLite, no auth, no rate limits."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('TEST_DATABASE_URL', 'sqlite://')
    SQLALCHEMY_ENGINE_OPTIONS = {}
    AUTH_ENABLED = False
    RATELIMIT_ENABLED = False
    SEED_ON_STARTUP = False
    LOG_LEVEL = 'DEBUG'
    LOG_FILE = os.environ.get('TEST_LOG_FILE', './logs/test.log')


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig,
}
