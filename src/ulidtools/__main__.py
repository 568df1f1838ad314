"""Allow ``python -m ulidtools``."""

from ulidtools.cli import main

main()
