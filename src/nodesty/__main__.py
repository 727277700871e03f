"""Allow ``python -m nodesty``."""

from nodesty.app import main

main()
