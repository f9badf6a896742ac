"""Module entrypoint for ``python -m indentmarkers``."""

from .cli import main


if __name__ == "__main__":
    main()
