"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    The app runs in click's standalone mode, which reports usage errors and
    aborts on its own and always ends in ``SystemExit``. Its code is returned
    instead of leaving the interpreter.
    """
    from sumdir.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        app(argv, prog_name="sumdir")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
