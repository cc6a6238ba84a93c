#!/usr/bin/env python3
"""
PANEL_WALK Launcher
====================
Run this script to start the game.
"""

from panel_walk.main import main

if __name__ == "__main__":
    main()
