# backend/modules/dashboard/__init__.py

"""
Dashboard Module

Summary statistics for the feedback dashboard: recent response volume,
active campaigns, average sentiment and the sentiment distribution.
"""

__version__ = "1.0.0"
