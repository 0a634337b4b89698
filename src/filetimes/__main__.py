"""Module entrypoint.

Allows:
    python -m filetimes
"""

from __future__ import annotations

from filetimes.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
