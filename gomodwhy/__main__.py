"""Allow ``python -m gomodwhy``."""

from gomodwhy.cli import main

main()
