from flask import Blueprint, render_template
from flask_login import login_required

from app.utils.auth import role_required
from app.utils.enums import UserRoles

church_admin_bp = Blueprint("church", __name__)


@church_admin_bp.route("/dashboard/")
@login_required
@role_required(UserRoles.CHURCH_ADMIN)
def dashboard():
    return render_template("church_admin/dashboard.html")
