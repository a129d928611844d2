"""Allow ``python -m loc_analyzer``."""

from .cli import app

if __name__ == "__main__":
    app()
