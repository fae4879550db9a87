"""Allow ``python -m jotl``."""

from jotl.cli.cli import main

if __name__ == "__main__":
    main()
