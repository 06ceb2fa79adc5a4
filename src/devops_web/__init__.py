"""
devops_web/__init__.py

Flask application factory for the DevOps sample welcome app.

The factory pattern gives every test its own isolated app instance and
lets callers swap the welcome message source through dependency injection.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from flask import Flask

from devops_web.config import get_welcome_message

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Dependency Type Definitions
# ---------------------------------------------------------------------------

WelcomeMessageFn = Callable[[], str]


# ---------------------------------------------------------------------------
# Flask Application Factory
# ---------------------------------------------------------------------------

def create_app(test_config: Optional[dict] = None,
               deps: Optional[dict] = None) -> Flask:
    """
    Create and configure a Flask application instance.

    Args:
        test_config (dict, optional):
            Configuration overrides used during testing.
            Example:
                {"TESTING": True}

        deps (dict, optional):
            Dependency injection container. Tests can inject:
                - welcome_message_fn

            If not provided, production defaults are used.

    Returns:
        Flask: configured Flask application instance.

    Raises:
        ValueError: if WELCOME_MESSAGE is misconfigured and no
            welcome_message_fn is injected.
    """
    app = Flask(__name__)

    if test_config:
        app.config.update(test_config)

    deps = deps or {}

    # Resolve the configured message once so a bad environment fails at
    # startup instead of on the first request.
    welcome_message_fn: WelcomeMessageFn = deps.get("welcome_message_fn")
    if welcome_message_fn is None:
        message = get_welcome_message()
        welcome_message_fn = lambda: message  # noqa: E731

    # Routes read these via current_app.extensions["deps"]
    app.extensions["deps"] = {
        "welcome_message_fn": welcome_message_fn,
    }

    from devops_web.pages import pages_bp
    app.register_blueprint(pages_bp)
    logger.info("Registered blueprint %r", pages_bp.name)

    return app
