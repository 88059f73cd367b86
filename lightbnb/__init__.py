"""
LightBnB data access layer and its FastAPI surface.
"""

__version__ = "1.0.0"
