"""
Development launcher for a plain checkout (no `pip install` needed).

    $ python run.py [--debug] [--log-file swipe.log]

Installed copies start the same way with `swipescale` or `python -m swipescale`.
"""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from swipescale.main import main

if __name__ == "__main__":
    main()
