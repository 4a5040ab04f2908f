"""Allow ``python -m dochub``."""

from .cli import main

main()
