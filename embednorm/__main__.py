"""Module entrypoint for running embednorm as ``python -m embednorm``."""

from __future__ import annotations

from embednorm.cli import main


if __name__ == "__main__":
    main()
