"""CSV backed source of review texts."""

import csv
import logging
import random
from threading import Lock
from typing import Dict, List


class RecordCache:
    """
    Records read from a CSV file on first use and kept in memory afterwards.

    Populated once under a lock, then only read, so one instance can serve
    concurrent requests.
    """

    def __init__(self, path: str, column: str = "text"):
        self.path = path
        self.column = column
        self._records: List[Dict[str, str]] = []
        self._loaded = False
        self._lock = Lock()

    @property
    def records(self) -> List[Dict[str, str]]:
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self._records = self._read()
                    self._loaded = True
        return self._records

    def _read(self) -> List[Dict[str, str]]:
        logging.info(f"Reading data from CSV {self.path}")
        with open(self.path, newline='', encoding='utf-8') as csv_file:
            records = list(csv.DictReader(csv_file))
        logging.info(f"Found {len(records)} reviews")
        return records

    def random_text(self) -> str:
        """Text of one record picked at random."""
        records = self.records
        if not records:
            raise LookupError(f"No records found in {self.path}")
        return random.choice(records)[self.column]
