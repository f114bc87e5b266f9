from datetime import datetime, timezone

import mongomock
import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from app.utils.database import db
from app.utils.init_roles import seed_database


@pytest.fixture
def app():
    app = create_app("config.TestConfig")
    db.mongo = mongomock.MongoClient().db["church_admin_test"]
    yield app
    db.mongo = None


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded_db(app):
    seed_database(db, app.config)
    return db


@pytest.fixture
def make_user(app):
    def _make_user(email, roles=(), verified=True, password="secret-pass"):
        db.users.insert_one(
            {
                "email": email,
                "name": email.split("@")[0],
                "password": generate_password_hash(password),
                "email_verified_at": datetime.now(timezone.utc) if verified else None,
                "roles": list(roles),
            }
        )
        return {"email": email, "password": password}

    return _make_user

