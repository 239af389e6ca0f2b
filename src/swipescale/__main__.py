"""
Run with: python -m swipescale
"""
from swipescale.main import main

if __name__ == "__main__":
    main()
