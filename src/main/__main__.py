"""
Main module entry point.

This allows running the data source as: python -m src.main
"""

from .server import main

if __name__ == "__main__":
    main()
