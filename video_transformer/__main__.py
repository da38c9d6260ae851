"""
Entry point for running the Video Transformer as a module.
"""

from .main import main

if __name__ == "__main__":
    main()
