"""Entry point for running jsguide as a module.

Usage:
    python -m jsguide [command] [options]

Example:
    python -m jsguide render --output build/guide.html
    python -m jsguide outline
"""

from jsguide.cli import app

if __name__ == "__main__":
    app()
