"""Allow ``python -m linux_errno``."""

from __future__ import annotations

from linux_errno.main import main

if __name__ == "__main__":
    raise SystemExit(main())
