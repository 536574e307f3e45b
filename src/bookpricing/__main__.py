"""Allow ``python -m bookpricing``."""
from bookpricing.cli.main import main

main()
