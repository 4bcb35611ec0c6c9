"""Fixed-bucket hash set driven by one string hash algorithm.

This is the consumer the collision benchmark measures algorithms through.
It never resizes and is not meant as a general-purpose container.
"""
from typing import Iterable, List
from hash_functions import Word, get_hash_function
from word_width import NATIVE_WORD, WordWidth


class HashSet:
    """Separate-chaining set whose buckets are chosen by a single algorithm.

    The algorithm is pinned at construction: hash values from different
    algorithms are unrelated, so switching would strand every stored word.
    The bucket count never changes.
    """

    def __init__(self, algorithm: str, bucket_count: int = 16381,
                 width: WordWidth = NATIVE_WORD):
        if bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self._algorithm = algorithm.upper()
        self._hash_func = get_hash_function(algorithm)
        self.width = width
        self.bucket_count = bucket_count
        self.buckets: List[List[Word]] = [[] for _ in range(bucket_count)]
        self.collisions = 0
        self._size = 0

    @property
    def algorithm(self) -> str:
        """Name of the algorithm this set hashes with."""
        return self._algorithm

    def bucket_index(self, word: Word) -> int:
        """Calculate the bucket for a word."""
        return self._hash_func(word, width=self.width) % self.bucket_count

    def add(self, word: Word) -> bool:
        """Add a word; return False if it was already present."""
        bucket = self.buckets[self.bucket_index(word)]
        if word in bucket:
            return False
        if bucket:
            self.collisions += 1
        bucket.append(word)
        self._size += 1
        return True

    def __contains__(self, word: Word) -> bool:
        return word in self.buckets[self.bucket_index(word)]

    def __len__(self) -> int:
        return self._size

    def build_from_words(self, words: Iterable[Word], progress_interval: int = 0):
        """Add every word, printing progress every progress_interval words."""
        words = list(words)
        for idx, word in enumerate(words):
            if progress_interval and idx % progress_interval == 0:
                print(f"  [{self.algorithm}] Processing word {idx}/{len(words)}...")
            self.add(word)

    def bucket_loads(self) -> List[int]:
        """Number of words in each bucket."""
        return [len(bucket) for bucket in self.buckets]

    @property
    def occupied_buckets(self) -> int:
        """Count buckets holding at least one word."""
        return sum(1 for bucket in self.buckets if bucket)

    @property
    def load_factor(self) -> float:
        return self._size / self.bucket_count
