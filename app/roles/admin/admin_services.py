from pymongo import errors

from app.utils.database import db
from app.utils.enums import UserRoles


# number of accounts holding each role
def users_count_by_role():
    try:
        users = db.users
        counts = {
            role.value: users.count_documents({"roles": role.value})
            for role in UserRoles
        }
        return {"status": "success", "data": counts}
    except errors.PyMongoError as e:
        return {"status": "fail", "message": f"Error counting users : {str(e)}"}
