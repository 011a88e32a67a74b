"""Allow ``python -m shelfsite``."""

from shelfsite.cli import main

if __name__ == "__main__":
    main()
