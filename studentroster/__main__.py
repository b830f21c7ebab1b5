"""
Package entry point.

Allows running the application via:

    python -m studentroster

This simply forwards execution to studentroster.cli.main().
"""

from studentroster.cli import main

if __name__ == "__main__":
    main()
