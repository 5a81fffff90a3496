"""Allow ``python -m promise_metrics``."""

from .cli import app

if __name__ == "__main__":
    app()
