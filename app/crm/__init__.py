import logging

from flask import Flask, g, render_template, request
from dotenv import load_dotenv

from app.crm.config import load_config
from app.crm.modules.customers.admin import bp as customers_bp
from app.crm.modules.customers.api_client import customers_api_from_config
from app.crm.routes import bp as routes_bp
from app.crm.security import assign_request_id, ensure_csrf_token, validate_csrf


def create_app() -> Flask:
    load_dotenv()
    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config.from_mapping(load_config())

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL") or "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @app.context_processor
    def _inject_csrf() -> dict:
        return {"csrf_token": ensure_csrf_token()}

    @app.before_request
    def _csrf_guard():
        assign_request_id()
        if request.path.startswith(("/static/", "/health", "/healthz")):
            return None
        ensure_csrf_token()
        if request.method in ("POST", "PUT", "PATCH", "DELETE"):
            if not validate_csrf(request):
                app.logger.warning("CSRF rejected: path=%s request_id=%s", request.path, g.request_id)
                return render_template("errors/400.html", message="CSRF token missing or invalid."), 400

    # Production guardrails (fail fast with clear logs)
    env = (app.config.get("ENV") or "").strip().lower()
    if env in ("prod", "production"):
        if not app.config.get("SECRET_KEY") or str(app.config["SECRET_KEY"]) in ("", "change-me"):
            raise RuntimeError("SECRET_KEY must be set to a strong value in production (not default).")
        if not app.config.get("CUSTOMERS_API_URL"):
            raise RuntimeError("CUSTOMERS_API_URL is required in production.")

    app.extensions["customers_api"] = customers_api_from_config(app.config)

    app.register_blueprint(routes_bp)
    app.register_blueprint(customers_bp)

    @app.errorhandler(400)
    def _err_400(e):  # type: ignore[no-redef]
        return render_template("errors/400.html", message=getattr(e, "description", None)), 400

    @app.errorhandler(404)
    def _err_404(e):  # type: ignore[no-redef]
        return render_template("errors/404.html"), 404

    @app.errorhandler(500)
    def _err_500(e):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return render_template("errors/500.html"), 500

    logging.getLogger(__name__).info(
        "create_app() complete; customers API at %s", app.config.get("CUSTOMERS_API_URL")
    )

    return app
