from functools import wraps

from bson import ObjectId
from bson.errors import InvalidId
from flask import abort
from flask_login import UserMixin, current_user
from app import login_manager

from .database import db
from .enums import UserRoles


class User(UserMixin):
    def __init__(self, user_id, name, email, roles=None, email_verified_at=None):
        self.id = user_id
        self.name = name
        self.email = email
        self.roles = list(roles or [])
        self.email_verified_at = email_verified_at

    @classmethod
    def from_document(cls, user_data):
        return cls(
            str(user_data["_id"]),
            user_data.get("name", ""),
            user_data.get("email", ""),
            user_data.get("roles", []),
            user_data.get("email_verified_at"),
        )

    @property
    def is_verified(self):
        return self.email_verified_at is not None

    def has_role(self, role):
        """Exact, case-sensitive match against the stored role names."""
        name = role.value if isinstance(role, UserRoles) else role
        return name in self.roles


@login_manager.user_loader
def load_user(user_id):
    try:
        user_data = db.users.find_one({"_id": ObjectId(user_id)})
    except InvalidId:
        return None
    if user_data:
        return User.from_document(user_data)
    return None


def role_required(role):
    """Allow only verified users holding `role`; everyone else gets a 403.

    Stack under `@login_required`, which handles anonymous requests.
    """

    def decorator(view):
        @wraps(view)
        def wrapped(*args, **kwargs):
            if not current_user.is_verified or not current_user.has_role(role):
                abort(403)
            return view(*args, **kwargs)

        return wrapped

    return decorator
