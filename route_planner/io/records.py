"""Tab-separated record reading.

Both data files share one shape: UTF-8 text, one record per line,
fields separated by tabs. Blank lines carry no record.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterator, List, Union


def read_records(path: Union[str, Path]) -> Iterator[List[str]]:
    """Yield the stripped fields of every non-blank line in ``path``.

    Each line is parsed on its own. A line the csv module rejects (a
    field over ``csv.field_size_limit()``, for instance) comes back as
    an empty list, so callers count it as a malformed record and carry on.

    Raises
    ------
    OSError
        If the file is missing or unreadable. The error surfaces on the
        first iteration, not at call time.
    UnicodeDecodeError
        If the file is not valid UTF-8.
    """
    with Path(path).open(newline="", encoding="utf-8-sig") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                row = next(csv.reader([line], delimiter="\t", quoting=csv.QUOTE_NONE), [])
            except csv.Error:
                yield []
                continue
            fields = [value.strip() for value in row]
            if not any(fields):
                continue
            yield fields
