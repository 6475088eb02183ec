from __future__ import annotations

import os
from typing import Any, Mapping

from flask import Flask
from loguru import logger

from .extensions import csrf
from .logging import setup_logging
from .services.assignments import PairingStrategy
from .views.santa import santa_bp


def _env_int(name: str) -> int | None:
    raw = (os.environ.get(name) or "").strip()
    return int(raw) if raw else None


def create_app(test_config: Mapping[str, Any] | None = None) -> Flask:
    app = Flask(__name__)

    app.config["SECRET_KEY"] = os.environ.get("SECRET_KEY", "dev-secret-change-me")
    app.config["LOG_LEVEL"] = os.environ.get("LOG_LEVEL", "INFO")
    app.config["LOG_PATH"] = os.environ.get("LOG_PATH") or None

    # Draw settings; a fixed seed makes every draw reproducible
    app.config["SANTA_PAIRING_STRATEGY"] = os.environ.get("SANTA_PAIRING_STRATEGY", "cycle").strip().lower()
    app.config["SANTA_SEED"] = _env_int("SANTA_SEED")
    app.config["SANTA_MAX_ATTEMPTS"] = _env_int("SANTA_MAX_ATTEMPTS") or 1000
    # The list rides in the session cookie, which browsers drop past ~4 KB
    app.config["SANTA_MAX_PARTICIPANTS"] = _env_int("SANTA_MAX_PARTICIPANTS") or 30

    if test_config:
        app.config.update(test_config)

    try:
        app.config["SANTA_PAIRING_STRATEGY"] = PairingStrategy(app.config["SANTA_PAIRING_STRATEGY"])
    except ValueError:
        choices = ", ".join(s.value for s in PairingStrategy)
        raise ValueError(
            f"SANTA_PAIRING_STRATEGY must be one of: {choices} (got {app.config['SANTA_PAIRING_STRATEGY']!r})."
        ) from None

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_PATH"])
    csrf.init_app(app)

    app.register_blueprint(santa_bp)

    @app.context_processor
    def inject_global_state():
        return {
            "app_title": "Secret Santa Generator",
            "pairing_strategy": app.config["SANTA_PAIRING_STRATEGY"].value,
        }

    logger.info("secret santa app ready (strategy={strategy})", strategy=app.config["SANTA_PAIRING_STRATEGY"].value)
    return app
