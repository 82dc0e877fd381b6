"""Module entrypoint for ``python -m outlinebar``."""

from .cli import main


if __name__ == "__main__":
    main()
