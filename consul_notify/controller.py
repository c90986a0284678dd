import logging
from typing import Optional

from flask import Flask, request

from .constants import (
    ALL_METHODS,
    HEALTH_PATH,
    INVALID_METHOD_MESSAGE,
    SLACK_WEBHOOK_URL,
    WATCH_PATH,
)
from .interceptor import intercept
from .notifier import Notifier, SlackNotifier

logger = logging.getLogger(__name__)


def watch_checks():
    # Só valida o método; o corpo é consumido pelo interceptor
    if request.method != "POST":
        return INVALID_METHOD_MESSAGE, 405
    return ""


def healthz():
    if request.method == "GET":
        logger.debug("Healthcheck acessado")
        return "OK", 200
    return INVALID_METHOD_MESSAGE, 405


def register_health(app: Flask) -> None:
    app.add_url_rule(
        HEALTH_PATH,
        "healthz",
        healthz,
        methods=ALL_METHODS,
        provide_automatic_options=False,
    )


def create_app(webhook_url: Optional[str] = None, notifier: Optional[Notifier] = None) -> Flask:
    app = Flask(__name__)
    if notifier is None:
        notifier = SlackNotifier(webhook_url or SLACK_WEBHOOK_URL)

    app.add_url_rule(
        WATCH_PATH,
        "watch_checks",
        intercept(watch_checks, notifier),
        methods=ALL_METHODS,
        provide_automatic_options=False,
    )
    register_health(app)
    return app


def create_health_app() -> Flask:
    """App separado só com o probe de liveness (processo próprio, porta 8080)."""
    app = Flask(__name__)
    register_health(app)
    return app
