from enum import Enum


class UserRoles(Enum):
    SUPER_ADMIN = "Super Admin"
    CHURCH_ADMIN = "Church Admin"

    @classmethod
    def values(cls):
        """Role names in declaration order, as stored in the roles collection."""
        return [role.value for role in cls]

    @classmethod
    def lookup(cls, name):
        """Return the member whose value is exactly `name`, or None."""
        if isinstance(name, cls):
            return name
        for role in cls:
            if role.value == name:
                return role
        return None
