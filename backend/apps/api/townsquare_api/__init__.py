"""
Townsquare API Application.

FastAPI-based REST API server for the Townsquare community board.
"""

__version__ = "0.1.0"
