import sys

from BinaryText.cli import main


if __name__ == "__main__":
    sys.exit(main())
