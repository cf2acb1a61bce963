"""Allow ``python -m dirpeek``."""

from dirpeek.cli import main

if __name__ == "__main__":
    main(prog_name="dirpeek")
