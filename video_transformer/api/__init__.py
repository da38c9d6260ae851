"""
API server for the Video Transformer.
"""

from .server import APIServer

__all__ = ["APIServer"]
