"""Where the SQLite database lives and how it survives restarts.

``file`` mode opens DATA_DIR/garment-flow.db directly. ``snapshot`` mode runs the
database in memory, loads it from that file at startup and writes it back on an
interval. In both modes a file that SQLite cannot read is copied to
``garment-flow.db.backup`` and replaced by a fresh database.
"""
import atexit
import logging
import os
import shutil
import sqlite3
import threading

logger = logging.getLogger(__name__)

DB_FILE_NAME = 'garment-flow.db'
BACKUP_SUFFIX = '.backup'
DATABASE_MODES = ('file', 'snapshot')


def database_path(app):
    return os.path.join(os.path.abspath(app.config['DATA_DIR']), DB_FILE_NAME)


def configure_database(app):
    """Fill SQLALCHEMY_DATABASE_URI from DATABASE_MODE unless a URL was given.

    Returns the snapshot file path in snapshot mode, otherwise None.
    """
    if app.config.get('SQLALCHEMY_DATABASE_URI'):
        return None

    mode = app.config.get('DATABASE_MODE', 'file')
    if mode not in DATABASE_MODES:
        raise ValueError(f"DATABASE_MODE must be one of {', '.join(DATABASE_MODES)}, got '{mode}'")

    path = database_path(app)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    if not check_database_file(path):
        recover_database_file(path)

    if mode == 'snapshot':
        app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite://'
        logger.info(f'Using in-memory database with snapshots to {path}')
        return path

    app.config['SQLALCHEMY_DATABASE_URI'] = f'sqlite:///{path}'
    logger.info(f'Using database file {path}')
    return None


def check_database_file(path):
    """True when the file is absent or passes PRAGMA quick_check."""
    if not os.path.exists(path):
        return True
    conn = None
    try:
        conn = sqlite3.connect(path)
        row = conn.execute('PRAGMA quick_check').fetchone()
        return row is not None and row[0] == 'ok'
    except sqlite3.DatabaseError as e:
        logger.warning(f'Database file {path} is unreadable: {e}')
        return False
    finally:
        if conn is not None:
            conn.close()


def recover_database_file(path):
    """Move a damaged database aside so a fresh one can be created in its place."""
    backup = path + BACKUP_SUFFIX
    shutil.copyfile(path, backup)
    os.remove(path)
    logger.warning(f'Corrupted database backed up to {backup}; starting with a fresh database')
    return backup


class SnapshotWriter:
    """Copies an in-memory SQLite database to disk every `interval` seconds."""

    def __init__(self, engine, path, interval=5.0):
        self.engine = engine
        self.path = path
        self.interval = interval
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread = None
        self._source = None
        self._flushed_changes = None

    def load(self):
        """Attach to the engine's single in-memory connection and fill it from the file."""
        raw = self.engine.raw_connection()
        try:
            self._source = raw.driver_connection
        finally:
            raw.close()

        if os.path.exists(self.path):
            disk = sqlite3.connect(self.path)
            try:
                disk.backup(self._source)
            finally:
                disk.close()
            logger.info(f'Loaded database snapshot from {self.path}')
        self._flushed_changes = self._source.total_changes

    def flush(self, force=False):
        """Write the database out atomically. Skipped when nothing changed since the last write."""
        with self._lock:
            changes = self._source.total_changes
            if not force and changes == self._flushed_changes and os.path.exists(self.path):
                return False
            tmp_path = self.path + '.tmp'
            target = sqlite3.connect(tmp_path)
            try:
                self._source.backup(target)
            finally:
                target.close()
            os.replace(tmp_path, self.path)
            self._flushed_changes = changes
        logger.debug(f'Database snapshot written to {self.path}')
        return True

    def start(self):
        if self._thread is not None:
            return
        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name='snapshot-writer', daemon=True)
        self._thread.start()
        atexit.register(self.stop)
        logger.info(f'Snapshot writer started (every {self.interval}s)')

    def stop(self):
        """Stop the timer and write a final snapshot. Returns False when already stopped."""
        if self._thread is None:
            return False
        self._stopped.set()
        self._thread.join()
        self._thread = None
        atexit.unregister(self.stop)
        self.flush()
        return True

    def _run(self):
        while not self._stopped.wait(self.interval):
            try:
                self.flush()
            except (sqlite3.Error, OSError) as e:
                logger.error(f'Failed to write database snapshot: {e}')
