"""Module entry point for ``python -m cali``."""

from cali.cli import main

raise SystemExit(main())
