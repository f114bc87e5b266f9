import logging

from pymongo import errors
from werkzeug.security import check_password_hash

from app.utils.auth import User
from app.utils.database import db

logger = logging.getLogger(__name__)


def authenticate(data):
    email = (data.get("email") or "").strip()
    password = data.get("password") or ""
    if not email or not password:
        return {"status": "fail", "message": "Email and password are required."}

    try:
        user_data = db.users.find_one({"email": email})
    except errors.PyMongoError as e:
        logger.exception("Login lookup failed for %s", email)
        return {"status": "fail", "message": f"Error during login: {str(e)}"}

    password_hash = user_data.get("password") if user_data else None
    if not password_hash or not check_password_hash(password_hash, password):
        logger.info("Failed login for %s", email)
        return {"status": "fail", "message": "Invalid login credentials!"}

    return {"status": "success", "data": User.from_document(user_data)}
