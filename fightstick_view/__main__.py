#!/usr/bin/env python3

"""
FightStick View - live fightstick input overlay

Usage:
    python -m fightstick_view [gamecontrollerdb.txt]

The optional argument is an SDL_GameControllerDB mappings file. Without
it, the usual locations are searched (current directory, assets/, ...).

Controls:
    ESC - Quit
"""

import sys
from pathlib import Path


def main():
    if len(sys.argv) > 2 or (len(sys.argv) == 2 and sys.argv[1] in ("-h", "--help")):
        print(__doc__)
        sys.exit(1)

    mappings_file = None
    if len(sys.argv) == 2:
        mappings_file = sys.argv[1]
        if not Path(mappings_file).exists():
            print(f"Error: File '{mappings_file}' not found")
            sys.exit(1)

    try:
        from .app import FightStickView
        from .config import OverlayConfig
        view = FightStickView(OverlayConfig(mappings_file=mappings_file))
        view.run()
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
