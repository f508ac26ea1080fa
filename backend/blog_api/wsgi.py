"""WSGI entry point for gunicorn and ``flask --app blog_api.wsgi``."""

from blog_api import create_app

app = create_app()
