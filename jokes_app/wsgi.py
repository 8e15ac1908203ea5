"""WSGI entry point, e.g. ``gunicorn jokes_app.wsgi:app``."""

from jokes_app.app import create_app

app = create_app()
