# backend/modules/sentiment/tests/__init__.py

"""
Test suite for the sentiment scoring module.

Test Structure:
- Unit tests for tokenizing, stemming and lexicon loading
- Unit tests for score normalization and classification
- Integration tests for POST /api/analyze-sentiment
"""

__version__ = "1.0.0"
