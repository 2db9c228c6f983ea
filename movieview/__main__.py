"""Module entrypoint for ``python -m movieview``.

All argument parsing and search setup happen in ``movieview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
