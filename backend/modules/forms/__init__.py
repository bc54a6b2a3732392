# backend/modules/forms/__init__.py

"""
Feedback Forms Module

Stores the questionnaires customers fill in (rating, choice and open-ended
questions) together with their visual appearance.
"""

__version__ = "1.0.0"
