"""Package entry point.

Preferred invocation is via the installed console script:

    arcset ...

For convenience we also support:

    python -m arcset ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m arcset` and the console script."""

    app()


if __name__ == "__main__":
    main()
