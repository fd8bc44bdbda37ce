"""Sample characters for random picks.

A flat table of code points covering every sequence length, so a random
pick shows off 1-, 2-, 3- and 4-byte forms alike.
"""

from __future__ import annotations

import random

from ..core.encoder import encode_code_point

SAMPLE_CODE_POINTS = (
    # 1 byte
    "0041", "0061", "0030", "0024", "0026", "0040", "007E",
    # 2 bytes
    "00A2", "00A9", "00E9", "00F1", "00DF", "03A9", "03C0", "0416",
    "05D0", "0628", "0394",
    # 3 bytes
    "20AC", "2122", "2190", "221E", "2603", "2665", "2713", "263A",
    "3042", "4E2D", "AC00", "0E01", "0915", "FB01",
    # 4 bytes
    "1F600", "1F389", "1F680", "1F40D", "1F355", "1F30D", "1F4A9",
    "1D11E", "10348", "1F914",
)


def sample_packed(index: int) -> int:
    """Packed value for entry index of the sample table."""
    if not 0 <= index < len(SAMPLE_CODE_POINTS):
        raise IndexError(f"Sample index must be 0-{len(SAMPLE_CODE_POINTS) - 1}, got {index}")
    return encode_code_point(SAMPLE_CODE_POINTS[index])


def random_packed(rng=None) -> int:
    """Packed value of a uniformly chosen sample.

    rng is anything with randrange(); the random module by default.
    """
    rng = rng or random
    return sample_packed(rng.randrange(len(SAMPLE_CODE_POINTS)))
