"""Run the development server: ``python -m blog_api``.

Production deployments go through gunicorn (see ``backend/gunicorn.conf.py``).
"""

from __future__ import annotations

import os

from blog_api import create_app


def main() -> None:
    port = os.getenv("PORT", "").strip()
    if not port.isdigit():
        raise SystemExit("PORT must be set to a numeric port before starting the server.")
    app = create_app()
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(port))


if __name__ == "__main__":
    main()
