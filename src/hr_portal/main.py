from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .accounts.controller import register as register_accounts
from .auth.controller import register as register_auth
from .common.logger import setup_logger
from .config import get_settings_module
from .container import build_container
from .database.storage import FileKeyValueStore, KeyValueStore
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .requests.controller import register as register_requests
from .routing.controller import register as register_routing


def create_app(slots: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    log = setup_logger(level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO))

    if slots is None:
        data_dir = Path(getattr(settings, "DATA_DIR"))
        slots = FileKeyValueStore(data_dir)
        log.info("settings=%s storage=%s", settings_module, data_dir.resolve())

    container = build_container(slots=slots)
    restored = container.session.restore()
    if restored:
        log.info("restored session for %s", restored.email)
    app.extensions["hr_portal"] = container

    register_routing(app, container)
    register_auth(app, container)
    register_employees(app, container)
    register_departments(app, container)
    register_accounts(app, container)
    register_requests(app, container)

    return app


def run() -> None:
    app = create_app()
    # one event at a time: the snapshot has a single writer
    app.run(debug=app.config["DEBUG"], threaded=False, use_reloader=False)


if __name__ == "__main__":
    run()
