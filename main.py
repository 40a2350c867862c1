"""Entry point for Neon Rush."""

import sys

from neon_rush.simulation.loop import main


if __name__ == "__main__":
    main(sys.argv[1:])
