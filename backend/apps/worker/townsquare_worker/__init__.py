"""
Townsquare Worker.

arq worker that runs background translation jobs.
"""

__version__ = "0.1.0"
