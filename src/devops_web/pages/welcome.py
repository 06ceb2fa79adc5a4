"""
Flask routes for the welcome page and the liveness probe.

The welcome message is read from current_app.extensions["deps"] so tests
can provide fakes without touching the environment.
"""
import logging

from flask import current_app, jsonify, render_template

from devops_web.pages import pages_bp

logger = logging.getLogger(__name__)

MODEL_ATTRIBUTE = "Gitlab"


@pages_bp.get("/")
def welcome():
    """
    Render the welcome page.

    The template receives a single model attribute, "Gitlab", holding the
    welcome message.
    """
    deps = current_app.extensions.get("deps", {})
    message = deps["welcome_message_fn"]()

    logger.debug("Rendering welcome page with %s=%r", MODEL_ATTRIBUTE, message)
    return render_template("welcome.html", **{MODEL_ATTRIBUTE: message})


@pages_bp.get("/health")
def health():
    """Liveness probe for deployment pipelines."""
    return jsonify({"status": "ok"})
