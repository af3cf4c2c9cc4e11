"""Allows running gosearch with ``python -m gosearch``."""

from gosearch.cli.main import main

if __name__ == "__main__":
    main()
