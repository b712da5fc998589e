"""Adapter for the DMSt handicap list export (positional CSV).

The export has a header row followed by one row per glider type. Only a
few columns are used:

    0   id                 running number, grows with each new type
    2   name               "ASW 20", "LS8-18"
    4   class              "Open", "18", "15", "Standard", "Club", "Double"
    16  previous handicap  handicap of the prior edition
    17  handicap           handicap of this edition
"""

import csv
from .base import BaseAdapter
from ..core.models import RosterRow


COL_ID = 0
COL_NAME = 2
COL_CLASS = 4
COL_PREVIOUS_HANDICAP = 16
COL_HANDICAP = 17


class DmstAdapter(BaseAdapter):
    """Parse the DMSt handicap list CSV into RosterRow records."""

    def parse(self, data_path: str) -> list[RosterRow]:
        rows = []
        with open(data_path, 'r', encoding='utf-8', newline='') as f:
            reader = csv.reader(f)
            next(reader, None)  # header
            for record in reader:
                if not any(cell.strip() for cell in record):
                    continue
                rows.append(self._parse_record(record, reader.line_num))
        return rows

    def _parse_record(self, record: list[str], line: int) -> RosterRow:
        if len(record) <= COL_HANDICAP:
            raise ValueError(
                f"Line {line}: expected at least {COL_HANDICAP + 1} columns, "
                f"got {len(record)}")

        name = record[COL_NAME].strip()
        if not name:
            raise ValueError(f"Line {line}: empty name in column {COL_NAME}")

        return RosterRow(
            id=self._parse_int(record[COL_ID], line, COL_ID, 'id'),
            name=name,
            class_flag=record[COL_CLASS].strip(),
            handicap=self._parse_int(record[COL_HANDICAP], line,
                                     COL_HANDICAP, 'handicap'),
            previous_handicap=self._parse_int(record[COL_PREVIOUS_HANDICAP], line,
                                              COL_PREVIOUS_HANDICAP,
                                              'previous handicap'),
        )

    @staticmethod
    def _parse_int(val: str, line: int, column: int, field: str) -> int:
        """Parse a strict integer field, raising ValueError with context."""
        s = val.strip()
        try:
            return int(s)
        except ValueError:
            raise ValueError(
                f"Line {line}: failed to parse {field} {s!r} in column {column}")
