"""
Credential Store - user registration and password verification.

Passwords are kept as salted pbkdf2:sha256 hashes produced by Werkzeug.
Email uniqueness is prechecked for a clean error, but the unique
constraint on ``users.email`` is what actually settles concurrent signups.
"""

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.security import check_password_hash, generate_password_hash

from todo_api.db import db
from todo_api.exceptions import DatabaseException, DuplicateEmailException, InvalidCredentialsException
from todo_api.repositories.user_repository import UserRepository

logger = structlog.get_logger('credentials')

PASSWORD_HASH_METHOD = "pbkdf2:sha256"

# Compared against when the email is unknown so both failure paths cost the same
_dummy_hash = None


def hash_password(raw_password):
    return generate_password_hash(raw_password, method=PASSWORD_HASH_METHOD)


def _get_dummy_hash():
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("not-a-real-password")
    return _dummy_hash


def register(email, raw_password, name=None):
    """Create a user, raising DuplicateEmailException if the email is taken"""
    if UserRepository.get_by_email(email) is not None:
        logger.info(f"Signup rejected, email already registered: {email}")
        raise DuplicateEmailException()

    try:
        user = UserRepository.add(email=email, name=name, password_hash=hash_password(raw_password))
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logger.info(f"Signup lost unique constraint race for {email}")
        raise DuplicateEmailException()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise DatabaseException(f"Error creating user {email}: {e}")

    logger.info(f"Created user {user.id}")
    return user


def verify(email, raw_password):
    """Return the user for valid credentials, else InvalidCredentialsException"""
    user = UserRepository.get_by_email(email)

    if user is None:
        check_password_hash(_get_dummy_hash(), raw_password)
        logger.warning(f"Incorrect login for {email}")
        raise InvalidCredentialsException()

    if not check_password_hash(user.password_hash, raw_password):
        logger.warning(f"Incorrect login for {email}")
        raise InvalidCredentialsException()

    logger.info(f"Successful login for user {user.id}")
    return user
