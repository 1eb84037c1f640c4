"""Module entrypoint for ``python -m cursorhistory``.

All argument parsing happens in ``cursorhistory.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
