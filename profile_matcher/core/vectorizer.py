"""
TF-IDF vectorizer over a vocabulary frozen at construction time.

Weighting (kept as-is, it is not textbook TF-IDF):
- tf  = count(token) / number of distinct tokens in the document
- idf = ln(vocabulary_size / (vocabulary_index + 1))

The distinct-token count includes tokens missing from the vocabulary; those
tokens get no weight of their own.
"""
import logging
import math
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from profile_matcher.core.tokenizer import tokenize

logger = logging.getLogger(__name__)


class ProfileVectorizer:
    """
    Maps profiles to fixed-length TF-IDF vectors.

    Token indices follow first occurrence, scanning the reference profiles in
    order and each profile left to right.
    """

    def __init__(self, profiles: Iterable[str]):
        vocabulary: List[str] = []
        word_to_index: Dict[str, int] = {}
        n_profiles = 0
        for profile in profiles:
            n_profiles += 1
            for word in tokenize(profile):
                if word not in word_to_index:
                    word_to_index[word] = len(vocabulary)
                    vocabulary.append(word)
        self._vocabulary: Tuple[str, ...] = tuple(vocabulary)
        self._word_to_index = word_to_index
        logger.debug("Built vocabulary of %d tokens from %d profiles", len(vocabulary), n_profiles)

    @property
    def vocabulary(self) -> Tuple[str, ...]:
        return self._vocabulary

    def __len__(self) -> int:
        return len(self._vocabulary)

    def __contains__(self, token) -> bool:
        return token in self._word_to_index

    def index_of(self, token: str) -> Optional[int]:
        return self._word_to_index.get(token)

    def transform(self, profile: str) -> np.ndarray:
        """
        Returns a 1-D float64 vector of length len(self).
        Tokens outside the vocabulary are dropped; an empty profile gives zeros.
        """
        size = len(self._vocabulary)
        vec = np.zeros(size, dtype=np.float64)
        term_frequency = Counter(tokenize(profile))
        n_distinct = len(term_frequency)
        for word, count in term_frequency.items():
            idx = self._word_to_index.get(word)
            if idx is None:
                continue
            tf = count / n_distinct
            idf = math.log(size / (idx + 1))
            vec[idx] = tf * idf
        return vec

    def transform_many(self, profiles: Sequence[str]) -> np.ndarray:
        """
        Stack transform() results into shape (len(profiles), len(self)).
        """
        mat = np.zeros((len(profiles), len(self._vocabulary)), dtype=np.float64)
        for i, profile in enumerate(profiles):
            mat[i] = self.transform(profile)
        return mat

    def __repr__(self) -> str:
        return f"ProfileVectorizer(vocabulary_size={len(self._vocabulary)})"


def build_vectorizer(profiles: Iterable[str]) -> ProfileVectorizer:
    return ProfileVectorizer(profiles)
