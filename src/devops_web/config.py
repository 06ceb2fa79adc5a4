"""
devops_web/config.py

Environment-driven configuration for the welcome application.

Responsibilities:
- Resolve the welcome message shown on the home page
- Resolve host/port for the local development server
"""

from __future__ import annotations

import os

DEFAULT_WELCOME_MESSAGE = "Welcome to Gitlab DevOps"
REQUIRED_SUBSTRING = "DevOps"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def get_welcome_message() -> str:
    """
    Return the message stored in the "Gitlab" model attribute.

    Supported configuration:
        WELCOME_MESSAGE (optional). Blank values fall back to the default.

    Raises:
        ValueError: if the configured message does not mention DevOps.
    """
    message = (os.getenv("WELCOME_MESSAGE") or "").strip()
    if not message:
        return DEFAULT_WELCOME_MESSAGE

    if REQUIRED_SUBSTRING not in message:
        raise ValueError(
            "WELCOME_MESSAGE is misconfigured.\n"
            f"The message must contain {REQUIRED_SUBSTRING!r}, got {message!r}."
        )

    return message


def get_server_address() -> tuple[str, int]:
    """
    Return (host, port) for the development server.

    Raises:
        ValueError: if PORT is set but is not an integer.
    """
    host = os.getenv("HOST") or DEFAULT_HOST
    raw_port = os.getenv("PORT")
    if not raw_port:
        return host, DEFAULT_PORT

    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None

    return host, port
