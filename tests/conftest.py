"""
conftest.py

Pytest configuration and shared fixtures for the welcome app test suite.

Responsibilities:
-----------------
- Make src/ importable (so "devops_web" and "run" resolve correctly)
- Provide an app wired with a fake welcome message source
- Capture rendered templates and their model through Flask signals
"""

import sys
from pathlib import Path

import pytest
from flask import template_rendered

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


from devops_web import create_app  # noqa: E402


@pytest.fixture()
def welcome_message():
    return "Welcome to Gitlab DevOps (test)"


@pytest.fixture()
def app(welcome_message):
    def fake_welcome_message():
        return welcome_message

    app = create_app(
        test_config={"TESTING": True},
        deps={"welcome_message_fn": fake_welcome_message},
    )
    return app


@pytest.fixture()
def client(app):
    """
    Standard Flask test client.
    """
    return app.test_client()


@pytest.fixture()
def captured_templates(app):
    """
    Record (template, context) pairs rendered by `app` during a test.

    The context is the view model the route handed to Jinja.
    """
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)
