"""Module entrypoint for ``python -m sfnav``."""

from .cli import main


if __name__ == "__main__":
    main()
