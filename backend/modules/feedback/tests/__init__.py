# backend/modules/feedback/tests/__init__.py

"""
Test suite for the feedback module.

Test Structure:
- Unit tests for the feedback service
- Integration tests for the /api/feedback endpoints
"""

__version__ = "1.0.0"
