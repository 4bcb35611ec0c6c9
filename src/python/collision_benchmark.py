"""Collision benchmark of the string hash algorithms over a word corpus."""
import random
import string
import time
from typing import Dict, List, Optional
from bench_config import BenchConfig
from distribution_statistics import DistributionStatistics
from hash_functions import get_hash_function
from hash_set import HashSet


def generate_random_words(count: int, min_len: int = 3, max_len: int = 15,
                          seed: Optional[int] = None) -> List[str]:
    """Generate count distinct random uppercase words."""
    if min_len < 1 or max_len < min_len:
        raise ValueError(f"Invalid word length range {min_len}..{max_len}")
    capacity = sum(len(string.ascii_uppercase) ** n for n in range(min_len, max_len + 1))
    if count > capacity:
        raise ValueError(f"Cannot generate {count} distinct words of length {min_len}..{max_len}")

    rng = random.Random(seed)
    words = {}
    while len(words) < count:
        length = rng.randint(min_len, max_len)
        words[''.join(rng.choices(string.ascii_uppercase, k=length))] = None
    return list(words)


class CollisionBenchmark:
    """Run each configured algorithm over the same words and compare."""

    def __init__(self, words: List[str], config: BenchConfig):
        self.words = words
        self.config = config
        self.results: List[Dict] = []

    def run_algorithm(self, name: str) -> Dict:
        """Populate a hash set with one algorithm and measure it."""
        hash_set = HashSet(name, self.config.bucket_count, self.config.width)

        start = time.perf_counter()
        hash_set.build_from_words(self.words, self.config.progress_interval)
        elapsed = time.perf_counter() - start

        hash_func = get_hash_function(name)
        distinct = len({hash_func(word, width=self.config.width) for word in self.words})

        stats = DistributionStatistics(hash_set)
        return {
            'algorithm': hash_set.algorithm,
            'items': len(hash_set),
            'collisions': hash_set.collisions,
            'expected_collisions': stats.expected_collisions(),
            'collision_ratio': stats.collision_ratio(),
            'chi_square': stats.chi_square(),
            'distinct_hashes': distinct,
            'uniform': stats.is_consistent_with_uniform(self.config.uniform_tolerance),
            'seconds': elapsed,
        }

    def run(self) -> List[Dict]:
        """Benchmark every configured algorithm."""
        self.results = [self.run_algorithm(name) for name in self.config.algorithms]
        return self.results

    def ranking(self) -> List[Dict]:
        """Results ordered from closest-to-uniform to furthest."""
        return sorted(self.results, key=lambda r: abs(r['collision_ratio'] - 1.0))

    def print_results(self):
        """Run if needed, then print a comparison table."""
        if not self.results:
            self.run()

        print("\n" + "=" * 80)
        print("COLLISION BENCHMARK")
        print("=" * 80)
        print(f"{'Algorithm':<10}{'Collisions':>12}{'Expected':>12}{'Ratio':>8}"
              f"{'Distinct':>10}{'Chi-sq':>12}{'ms':>9}  Uniform")
        for r in self.ranking():
            mark = "✓" if r['uniform'] else "⚠"
            print(f"{r['algorithm']:<10}{r['collisions']:>12,}"
                  f"{r['expected_collisions']:>12,.1f}{r['collision_ratio']:>8.3f}"
                  f"{r['distinct_hashes']:>10,}{r['chi_square']:>12,.1f}"
                  f"{r['seconds'] * 1000:>9.1f}  {mark}")
        print("=" * 80)
