from __future__ import annotations
import argparse
from dataclasses import dataclass

DEFAULT_THRESHOLD = 0.9
DEFAULT_TOP_N = 20

ON_FILE_ERROR_ABORT = "abort"
ON_FILE_ERROR_SKIP = "skip"
FILE_ERROR_POLICIES = (ON_FILE_ERROR_ABORT, ON_FILE_ERROR_SKIP)


@dataclass(frozen=True)
class SelectorConfig:
    """Knobs of the top-N selection, passed down the recursion.

    ``limit`` of 0 means "no limit": every candidate is returned (still sorted).
    """
    threshold: float = DEFAULT_THRESHOLD
    limit: int = DEFAULT_TOP_N

    def __post_init__(self):
        if not (0.0 < self.threshold < 1.0):
            raise ValueError(f"threshold must be in range (0.0 - 1.0), got {self.threshold!r}")
        if self.limit < 0:
            raise ValueError(f"limit must not be negative, got {self.limit!r}")


def parse_threshold(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid threshold: {raw!r}")
    # NaN fails both comparisons
    if not (0.0 < value < 1.0):
        raise argparse.ArgumentTypeError("threshold not in range (0.0 - 1.0)")
    return value


def parse_top_n(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid N: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError("N must be greater than 0")
    return value
