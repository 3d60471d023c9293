"""
Model: User
"""

from todo_api.db import db
from todo_api.utils import new_id, now_utc


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    name = db.Column(db.String(100))
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=now_utc, nullable=False)
    updated_at = db.Column(db.DateTime, default=now_utc, onupdate=now_utc, nullable=False)

    def to_dict(self):
        # password_hash never leaves the model
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
        }

    def __repr__(self):
        return f"<User {self.email}>"
