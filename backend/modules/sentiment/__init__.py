# backend/modules/sentiment/__init__.py

"""
Sentiment Scoring Module

Scores free-text customer feedback on a 0-100 scale and labels it
positive, neutral or negative.

Key Components:
- Tokenizer: splits text into word tokens
- Stemmer: Porter stemming so inflected forms share one lexicon entry
- Lexicon: immutable AFINN-style stem -> weight table, loaded once
- Analyzer: averages matched weights and normalizes them to 0-100

Integration Points:
- Feedback: messages submitted without a sentiment are scored on creation
- API: POST /api/analyze-sentiment scores text without persisting it
"""

__version__ = "1.0.0"
