"""Module entrypoint for ``python -m grepbrowse``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and process exit policy live in ``grepbrowse.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
