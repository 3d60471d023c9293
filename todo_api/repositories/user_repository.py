"""
Repository for User database operations
"""

from todo_api.db import db
from todo_api.models.user import User


class UserRepository:
    """Repository for User database operations"""

    @staticmethod
    def get_by_email(email):
        """Get User by email (exact match)"""
        return User.query.filter_by(email=email).first()

    @staticmethod
    def add(**kwargs):
        """Stage a new User record"""
        item = User(**kwargs)
        db.session.add(item)
        return item

