"""Hash benchmark configuration."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List
from hash_functions import HASH_FUNCTIONS, get_hash_function
from word_width import NATIVE_WORD, WordWidth


# SCOWL word list parameters
# See: http://wordlist.aspell.net/scowl-readme/ for parameter documentation
SCOWL_CONFIG = {
    'max_size': 60,          # 10, 20, 35 (small), 40, 50 (medium), 55, 60 (default), 70 (large), 80, 95
    'spelling': ['US'],      # US, GBs, GBz, CA, AU
    'max_variant': 0,        # 0 (none), 1 (common), 2 (acceptable), 3 (seldom-used)
    'diacritic': 'strip',    # strip, keep, both
    'special': ['hacker', 'roman-numerals'],
    'encoding': 'utf-8',
    'format': 'inline',
}

BUILD_DIR = Path('build')
CACHE_DIR = BUILD_DIR / 'cache'


@dataclass
class BenchConfig:
    """Settings for running hash algorithms over a word corpus."""

    width: WordWidth = NATIVE_WORD
    bucket_count: int = 16381
    algorithms: List[str] = field(default_factory=lambda: list(HASH_FUNCTIONS))
    sample_size: int = 10000
    progress_interval: int = 0
    random_seed: int = 1315423911
    uniform_tolerance: float = 0.25

    def __post_init__(self):
        if self.bucket_count <= 0:
            raise ValueError(f"bucket_count must be positive, got {self.bucket_count}")
        if self.sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {self.sample_size}")
        # Fail on unknown names before any hashing starts
        self.algorithms = [name.upper() for name in self.algorithms]
        for name in self.algorithms:
            get_hash_function(name)

    def expected_load(self, word_count: int) -> float:
        """Mean words per bucket for a given corpus size."""
        return word_count / self.bucket_count

    def print_summary(self, word_count: int):
        """Print configuration summary."""
        self.width.print_summary()
        print(f"Algorithms: {', '.join(self.algorithms)}")
        print(f"Buckets: {self.bucket_count:,}")
        print(f"Words: {word_count:,} (mean load {self.expected_load(word_count):.3f})")
        print(f"Uniform tolerance: ±{self.uniform_tolerance * 100:.0f}% of expected collisions")
        print("=" * 80)
        print()
