"""WSGI entry point: ``gunicorn -c gunicorn.conf.py signup.wsgi:app``."""

from __future__ import annotations

from signup.factory import create_app

app = create_app()
