"""Allow ``python -m pollwatch``."""

from pollwatch.cli.main import main

if __name__ == "__main__":
    main()
