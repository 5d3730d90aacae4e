import sys

from substrate_decoder.cli import main

if __name__ == "__main__":
    sys.exit(main())
