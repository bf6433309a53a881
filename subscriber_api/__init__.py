# subscriber_api/__init__.py
"""
Package entrypoint for the Subscriber API.

This lets us run:
    uvicorn subscriber_api:app --reload

The app is built on first access to ``app``, so importing submodules
(the seed script, the error types) reads no settings and builds nothing.
"""

__all__ = ["app", "create_app"]

_app = None


def __getattr__(name):
    global _app

    if name == "create_app":
        from .main import create_app

        return create_app
    if name == "app":
        if _app is None:
            from .main import create_app

            _app = create_app()
        return _app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
