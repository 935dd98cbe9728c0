import logging
import re
from pathlib import Path
from typing import List

from graphaudit.errors import InvalidGraphError

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r"\d+")


class MatrixReader:
    """Reads an adjacency matrix from a delimited text file.

    Format, one matrix row per line:
        0;1;0
        1,0,1
        0	1	0
    Any delimiter works: every run of digits on a line is a value. Lines
    without digits (blank lines included) are skipped.
    """

    def __init__(self, filepath: str):
        self.filepath = Path(filepath)

    def read(self) -> List[List[int]]:
        """Read the file and return the matrix rows."""
        if not self.filepath.exists():
            raise FileNotFoundError(f"Matrix file not found: {self.filepath}")

        with self.filepath.open("r", encoding="utf-8-sig") as f:
            rows = [[int(v) for v in _NUMBER.findall(line)] for line in f]
        rows = [row for row in rows if row]

        node_count = len(rows)
        for idx, row in enumerate(rows, start=1):
            if len(row) != node_count:
                raise InvalidGraphError(
                    f"Row {idx} has an invalid number of values ({len(row)}). Expected: {node_count}."
                )

        logger.debug("Read %d matrix row(s) from %s", node_count, self.filepath)
        return rows
