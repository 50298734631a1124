"""``python -m shapedraw [--debug] [--smoke]`` opens the diagram editor."""

import sys

from .ui import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
