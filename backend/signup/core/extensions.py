"""Per-application extension instances and initialization helpers."""

from __future__ import annotations

from flask import Flask, current_app

from signup.repositories.user import UserRepository

STORE_KEY = "user_store"


def init_app(app: Flask, store: UserRepository | None = None) -> None:
    """Attach the registration store to ``app``.

    Parameters
    ----------
    app: flask.Flask
        Application that owns the store for its whole lifetime.
    store: UserRepository, optional
        Pre-built repository (tests inject one); a fresh, empty repository is
        created when omitted.
    """
    app.extensions[STORE_KEY] = store if store is not None else UserRepository()


def get_store(app: Flask | None = None) -> UserRepository:
    """Return the store bound to ``app`` or to the current application."""
    target = app if app is not None else current_app
    store = target.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("User store is not initialized. Call init_app() first.")
    return store
