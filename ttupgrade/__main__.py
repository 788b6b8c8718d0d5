"""Allow ``python -m ttupgrade``."""

import sys

from .cli import main

main(sys.argv[1:])
