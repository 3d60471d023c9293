import os
import threading

import structlog
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event, inspect
from sqlalchemy.exc import SQLAlchemyError

from todo_api.exceptions import DatabaseException

# Retrieve main logger
logger = structlog.get_logger("db")

db = SQLAlchemy()

_init_lock = threading.Lock()
_EXTENSION_KEY = "todo_api.db_initialized"


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enforce foreign keys, wait on locks and fold Unicode case for SQLite connections"""
    import sqlite3

    if not isinstance(dbapi_connection, sqlite3.Connection):
        return

    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON;")
    cursor.execute("PRAGMA busy_timeout=30000;")
    cursor.close()

    # Builtin lower() only folds ASCII; ilike compiles to lower() on SQLite
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def ensure_sqlite_dir(database_uri):
    """Create the parent directory of a file-backed SQLite database"""
    prefix = "sqlite:///"
    if not database_uri.startswith(prefix) or database_uri == prefix + ":memory:":
        return
    directory = os.path.dirname(database_uri[len(prefix):])
    if directory:
        os.makedirs(directory, exist_ok=True)


def init_db(app):
    """
    Create the schema for ``app`` exactly once.

    Safe to call from several threads and several times: the first caller
    does the work under a lock, later callers return immediately.
    """
    if app.extensions.get(_EXTENSION_KEY):
        return False

    with _init_lock:
        if app.extensions.get(_EXTENSION_KEY):
            return False

        ensure_sqlite_dir(app.config["SQLALCHEMY_DATABASE_URI"])

        with app.app_context():
            # Import models so their tables are registered on the metadata
            from todo_api import models  # noqa: F401

            event.listen(db.engine, "connect", _set_sqlite_pragma)

            inspector = inspect(db.engine)
            if not inspector.has_table("users"):
                logger.info("Initializing database tables...")
            db.create_all()

        app.extensions[_EXTENSION_KEY] = True
        logger.info("Database ready")
        return True


def is_db_initialized(app):
    return bool(app.extensions.get(_EXTENSION_KEY))


def commit_or_raise(action):
    """Commit the session; on failure roll back and raise DatabaseException"""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise DatabaseException(f"Error trying to {action}: {e}")
