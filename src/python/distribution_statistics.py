"""Bucket distribution statistics for a populated hash set."""
from hash_set import HashSet


class DistributionStatistics:
    """Compare a hash set's bucket distribution with a uniform hash."""

    def __init__(self, hash_set: HashSet):
        self.hash_set = hash_set

    @property
    def n(self) -> int:
        return len(self.hash_set)

    @property
    def m(self) -> int:
        return self.hash_set.bucket_count

    def expected_occupied(self) -> float:
        """Expected occupied buckets for a uniform hash: m(1 - (1 - 1/m)^n)."""
        return self.m * (1 - (1 - 1 / self.m) ** self.n)

    def expected_collisions(self) -> float:
        """Expected words landing in an occupied bucket: n - occupied."""
        return self.n - self.expected_occupied()

    def collision_ratio(self) -> float:
        """Observed collisions divided by the uniform expectation."""
        expected = self.expected_collisions()
        if expected == 0:
            return 1.0 if self.hash_set.collisions == 0 else float('inf')
        return self.hash_set.collisions / expected

    def chi_square(self) -> float:
        """Chi-square statistic of bucket loads against the mean load n/m."""
        mean = self.n / self.m
        if mean == 0:
            return 0.0
        return sum((load - mean) ** 2 for load in self.hash_set.bucket_loads()) / mean

    def is_consistent_with_uniform(self, tolerance: float = 0.25) -> bool:
        """True if observed collisions are within tolerance of the expectation."""
        return abs(self.collision_ratio() - 1.0) <= tolerance

    def print_statistics(self):
        """Print distribution statistics."""
        n = self.n
        m = self.m
        observed = self.hash_set.collisions
        expected = self.expected_collisions()

        print(f"\n=== {self.hash_set.algorithm} DISTRIBUTION ===")
        print(f"Words inserted (n): {n:,}")
        print(f"Buckets (m): {m:,}")
        print(f"Load factor (n/m): {self.hash_set.load_factor:.3f}")
        print(f"\nOccupied buckets: {self.hash_set.occupied_buckets:,} "
              f"(uniform expects {self.expected_occupied():,.1f})")
        print(f"Collisions: {observed:,} (uniform expects {expected:,.1f})")
        print(f"Formula: n - m(1 - (1 - 1/m)^n) = {expected:.2f}")
        print(f"Collision ratio: {self.collision_ratio():.3f}")
        print(f"Chi-square ({m - 1} degrees of freedom): {self.chi_square():,.1f}")
