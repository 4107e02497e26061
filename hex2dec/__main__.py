import sys

from hex2dec.cli import main

if __name__ == "__main__":
    sys.exit(main())
