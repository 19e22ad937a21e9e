"""Allow ``python -m gitwho.cli``."""

from gitwho.cli import cli_main

cli_main()
