from flask import Blueprint, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required, login_user, logout_user

from app.utils.redirects import login_redirect, remember_intended_url
from .auth_services import authenticate

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login/", methods=["GET", "POST"])
def login():
    # `next` arrives as a query arg from the login_required redirect
    remember_intended_url(request.values.get("next"))

    if current_user.is_authenticated:
        return login_redirect(current_user)

    # Handle POST
    if request.method == "POST":
        response = authenticate(request.form)
        if response["status"] == "success":
            login_user(response["data"])  # Sets `current_user`
            return login_redirect(response["data"])

        flash(("error", response["message"], "Login Failed"))
        return redirect(url_for("auth.login"))

    return render_template("login.html")


@auth_bp.route("/logout/")
@login_required
def logout():
    logout_user()
    flash(("success", "You have been logged out."))
    return redirect(url_for("auth.login"))
