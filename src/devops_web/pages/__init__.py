"""
devops_web/pages/__init__.py

Blueprint holding the page routes of the welcome application.
"""

from flask import Blueprint

pages_bp = Blueprint(
    "pages",     # Blueprint name
    __name__     # Import reference name
)

# Import route modules so Flask registers them with the Blueprint
from devops_web.pages import welcome  # pylint: disable=wrong-import-position  # noqa: F401,E402
