"""Generation of the plain data file."""

from __future__ import annotations

import os
import random
from typing import Optional, Union

from extsearch.record import Record

RAND_MAX = 2**31 - 1


def generate_file(
    num_lines: int,
    path: Union[str, os.PathLike],
    rng: Optional[random.Random] = None,
) -> int:
    """Write records keyed 0..num_lines-1 with random data; return the count."""
    rng = rng or random.Random()
    written = 0
    with open(path, "wb") as out:
        for key in range(num_lines):
            data1 = rng.randint(0, RAND_MAX) * rng.randint(0, RAND_MAX)
            out.write(Record(key, data1, " ", " ").pack())
            written += 1
    return written