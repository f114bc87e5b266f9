import logging

from flask import Flask, render_template
from flask_login import LoginManager
from flask_toastr import Toastr

from app.utils.database import db
from app.utils.enums import UserRoles
from app.utils.init_roles import register_seed_command, seed_database

login_manager = LoginManager()
toastr = Toastr()


def configure_logging(app):
    level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    logging.getLogger("app").setLevel(level)


def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)  # Initialize the database connection
    login_manager.init_app(app)
    login_manager.login_view = "auth.login"
    login_manager.login_message = ("info", "Please log in to access this page.")
    toastr.init_app(app)

    # Register blueprints
    from app.auth.auth_controllers import auth_bp
    from app.roles.admin.admin_controllers import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.route("/")
    def home():
        return render_template("welcome.html", can_register=False)

    @app.errorhandler(403)
    def forbidden(error):
        return render_template("errors/403.html"), 403

    # Injecting Enums Globally
    @app.context_processor
    def inject_enums():
        return dict(UserRoles=UserRoles)

    register_seed_command(app)

    if app.config.get("SEED_ON_STARTUP"):
        with app.app_context():  # Ensure proper app context for database operations
            seed_database(db, app.config)

    return app
