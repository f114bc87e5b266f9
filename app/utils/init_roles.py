import logging
from datetime import datetime, timezone

import click
from flask import current_app
from pymongo import errors
from werkzeug.security import generate_password_hash

from .database import db as app_db
from .enums import UserRoles

logger = logging.getLogger(__name__)

GUARD_NAME = "web"


def seed_roles(db):
    """Create a role record for every UserRoles value that is missing one."""
    roles = db.roles
    created = []
    for role in UserRoles:
        if roles.find_one({"name": role.value}):
            continue
        try:
            roles.insert_one({"name": role.value, "guard_name": GUARD_NAME})
        except errors.DuplicateKeyError:
            # another seeder got there first
            continue
        logger.info("Created role %r", role.value)
        created.append(role.value)
    return created


def bootstrap_accounts(config):
    return [
        {
            "email": config["SUPER_ADMIN_EMAIL"],
            "name": "Super Admin",
            "password": config["BOOTSTRAP_PASSWORD"],
            "role": UserRoles.SUPER_ADMIN,
        },
        {
            "email": config["CHURCH_ADMIN_EMAIL"],
            "name": "Church Admin",
            "password": config["BOOTSTRAP_PASSWORD"],
            "role": UserRoles.CHURCH_ADMIN,
        },
    ]


def seed_users(db, accounts):
    """Create each account by email if absent and make sure it holds its role.

    Existing accounts keep their attributes; only a missing role is added.
    """
    users = db.users
    created, assigned = [], []
    for account in accounts:
        email = account["email"]
        role_name = account["role"].value

        user = users.find_one({"email": email})
        if not user:
            try:
                users.insert_one(
                    {
                        "email": email,
                        "name": account["name"],
                        "password": generate_password_hash(account["password"]),
                        "email_verified_at": datetime.now(timezone.utc),
                        "roles": [],
                    }
                )
                logger.info("Created bootstrap account %s", email)
                created.append(email)
            except errors.DuplicateKeyError:
                logger.info("Bootstrap account %s was created concurrently", email)
            user = users.find_one({"email": email})

        if role_name not in user.get("roles", []):
            users.update_one({"_id": user["_id"]}, {"$addToSet": {"roles": role_name}})
            logger.info("Assigned role %r to %s", role_name, email)
            assigned.append((email, role_name))

    return {"created": created, "assigned": assigned}


def seed_database(db, config):
    # Roles first, accounts reference them by name
    db.ensure_indexes()
    roles = seed_roles(db)
    result = seed_users(db, bootstrap_accounts(config))
    result["roles"] = roles
    return result


def register_seed_command(app):
    @app.cli.command("seed")
    def seed_command():
        """Provision roles and the bootstrap accounts."""
        result = seed_database(app_db, current_app.config)
        click.echo(
            f"Roles created: {len(result['roles'])}, "
            f"accounts created: {len(result['created'])}, "
            f"roles assigned: {len(result['assigned'])}"
        )
