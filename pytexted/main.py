from __future__ import annotations
import sys
from pytexted.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pytexted.main` or the `pytexted` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
