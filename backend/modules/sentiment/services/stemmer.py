# backend/modules/sentiment/services/stemmer.py

from functools import lru_cache

from nltk.stem import PorterStemmer


class Stemmer:
    """
    Reduce tokens to their Porter root form.

    Tokens are lower-cased before stemming, so "Loved" and "loved" both
    become "love". Results are memoized because feedback text repeats
    the same small vocabulary over and over.
    """

    def __init__(self, cache_size: int = 8192):
        self._porter = PorterStemmer(mode=PorterStemmer.NLTK_EXTENSIONS)
        self._stem_cached = lru_cache(maxsize=cache_size)(self._stem)

    def _stem(self, token: str) -> str:
        return self._porter.stem(token.lower())

    def stem(self, token: str) -> str:
        if not token:
            return ""
        return self._stem_cached(token)
