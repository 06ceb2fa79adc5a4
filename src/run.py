"""
run.py

Local development entry point for the DevOps sample welcome app.

How to run:
-----------
1) Optionally set WELCOME_MESSAGE, HOST and PORT
2) python3 run.py
3) Open http://127.0.0.1:8080/

In production, a WSGI server (e.g., gunicorn) would import `app`
instead of running Flask's built-in server.
"""

import logging

from devops_web import create_app
from devops_web.config import get_server_address

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

app = create_app()

if __name__ == "__main__":
    host, port = get_server_address()
    app.run(host=host, port=port, debug=False)
