"""Entry point: python -m routegen --file openapi.yaml [--out routes.go] [--pkg main]"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
