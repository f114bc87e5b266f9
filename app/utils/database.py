from flask_pymongo import PyMongo
from pymongo import ASCENDING

USERS = "users"
ROLES = "roles"


class Database:
    """Flask-PyMongo handle plus the collections this portal works with."""

    def __init__(self, app=None):
        self.mongo = None
        if app:
            self.init_app(app)

    def init_app(self, app):
        self.mongo = PyMongo(app).db

    def get_collection(self, collection_name):
        if self.mongo is None:
            raise RuntimeError("Database connection is not initialized.")
        return self.mongo[collection_name]

    @property
    def users(self):
        return self.get_collection(USERS)

    @property
    def roles(self):
        return self.get_collection(ROLES)

    def ensure_indexes(self):
        # Seeding relies on these to reject a second account or role record
        self.roles.create_index([("name", ASCENDING)], unique=True)
        self.users.create_index([("email", ASCENDING)], unique=True)


db = Database()
