# backend/modules/sentiment/services/tokenizer.py

import re
from typing import List

# A word is a run of letters/digits; an apostrophe is kept only between two of them
WORD_PATTERN = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")


class WordTokenizer:
    """Split free text into word tokens, discarding punctuation and whitespace"""

    def __init__(self, pattern: re.Pattern = WORD_PATTERN):
        self.pattern = pattern

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []
        return self.pattern.findall(text)


def tokenize(text: str) -> List[str]:
    return WordTokenizer().tokenize(text)
