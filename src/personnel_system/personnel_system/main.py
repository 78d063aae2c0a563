from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, abort, render_template, send_from_directory

from config import get_settings_module

from .container import Container, build_container
from .core.enums import AttachmentMode
from .core.exceptions import NotFoundError
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .timesheets.controller import register as register_timesheets

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def _load_settings(app: Flask, settings) -> None:
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DB_CONFIG"] = dict(getattr(settings, "DB_CONFIG"))
    app.config["ATTACHMENT_MODE"] = str(getattr(settings, "ATTACHMENT_MODE", AttachmentMode.LOCAL.value)).lower()
    app.config["UPLOAD_FOLDER"] = str(getattr(settings, "UPLOAD_FOLDER", REPO_ROOT / "static" / "uploads"))
    app.config["IMAGE_HOST_CLIENT_ID"] = getattr(settings, "IMAGE_HOST_CLIENT_ID", "")
    app.config["UPLOAD_TIMEOUT"] = getattr(settings, "UPLOAD_TIMEOUT", None)
    app.config["PAGE_SIZE"] = int(getattr(settings, "PAGE_SIZE", 5))
    app.config["DEFAULT_SALARY_CEILING"] = getattr(settings, "DEFAULT_SALARY_CEILING", 10000)


def _bootstrap_database(app: Flask, settings) -> None:
    db_config = app.config["DB_CONFIG"]
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
        logger.info("Demo seed ready")


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _load_settings(app, settings)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = app.config["DB_CONFIG"]
        logger.info(
            "settings=%s db=%s@%s:%s/%s attachments=%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            app.config["ATTACHMENT_MODE"],
        )
        _bootstrap_database(app, settings)
        container = build_container(
            db_config=db_config,
            attachment_config={
                "mode": app.config["ATTACHMENT_MODE"],
                "upload_folder": app.config["UPLOAD_FOLDER"],
                "image_client_id": app.config["IMAGE_HOST_CLIENT_ID"],
                "timeout": app.config["UPLOAD_TIMEOUT"],
            },
        )

    app.extensions["container"] = container

    @app.route("/", endpoint="index")
    def index():
        return render_template("index.html")

    @app.route("/uploads/<path:filename>", endpoint="uploads")
    def uploads(filename: str):
        if app.config["ATTACHMENT_MODE"] != AttachmentMode.LOCAL.value:
            abort(404)
        return send_from_directory(app.config["UPLOAD_FOLDER"], filename)

    @app.errorhandler(NotFoundError)
    def handle_not_found(error: NotFoundError):
        return render_template("404.html", message=str(error)), 404

    @app.errorhandler(404)
    def handle_404(error):
        return render_template("404.html", message="Page not found"), 404

    register_employees(app, container)
    register_timesheets(app, container)

    return app
