"""
Map a final entropy value to one of six ordered strength buckets.
"""

from __future__ import annotations

# (lower bound in bits, bucket), highest first. Lower bounds are inclusive.
THRESHOLDS: tuple[tuple[float, int], ...] = (
    (60.0, 5),
    (48.0, 4),
    (36.0, 3),
    (24.0, 2),
    (12.0, 1),
)

BUCKET_COUNT = 6


def classify(entropy: float) -> int:
    for lower, bucket in THRESHOLDS:
        if entropy >= lower:
            return bucket
    return 0
