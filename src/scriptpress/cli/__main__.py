"""Main entry point for scriptpress CLI when run as a module."""

from scriptpress.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
