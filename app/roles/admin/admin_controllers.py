from flask import Blueprint, flash, render_template
from flask_login import login_required

from app.roles.church_admin.church_admin_controllers import church_admin_bp
from app.utils.auth import role_required
from app.utils.enums import UserRoles
from .admin_services import users_count_by_role

admin_bp = Blueprint("admin", __name__)

# endpoints under admin.church.*
admin_bp.register_blueprint(church_admin_bp, url_prefix="/church")


@admin_bp.route("/dashboard/")
@login_required
@role_required(UserRoles.SUPER_ADMIN)
def dashboard():
    response = users_count_by_role()
    role_counts = {}
    if response["status"] == "success":
        role_counts = response["data"]
    else:
        flash(("error", response["message"]))
    return render_template("admin/dashboard.html", role_counts=role_counts)
