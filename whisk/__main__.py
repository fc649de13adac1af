"""Entry point for ``python -m whisk``."""

from whisk.cli import main

if __name__ == "__main__":
    main()
