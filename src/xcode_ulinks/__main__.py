"""
`python -m xcode_ulinks` entrypoint.

The installed console script `xcode-ulinks` calls the same `xcode_ulinks.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
