# backend/modules/feedback/__init__.py

"""
Customer Feedback Module

This module provides functionality for:
- Collecting customer feedback messages
- Scoring feedback sentiment when none is supplied
- Filtering feedback by sentiment for the dashboard

Key Components:
- Models: Feedback table with sentiment label and 0-100 score
- Services: Feedback CRUD with automatic sentiment scoring
- Routers: /api/feedback endpoints

Integration Points:
- Sentiment: messages are scored by the shared sentiment analyzer
- Dashboard: feedback counts and scores feed the dashboard stats
"""

__version__ = "1.0.0"
