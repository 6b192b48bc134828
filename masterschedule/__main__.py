"""
Package entry point.

Allows running the application via:

    python -m masterschedule

This simply forwards execution to masterschedule.cli.main().
"""

from masterschedule.cli import main

if __name__ == "__main__":
    main()
