"""Allow ``python -m gitroot``."""

from gitroot.cli import main

if __name__ == "__main__":
    main()
