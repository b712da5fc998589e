"""Adapter for competition rosters (header-keyed CSV).

Columns are matched by header name:

    Model, Handicap, <one column per class flag>

The flag columns default to 18, 15, Std, Club and Double; callers pass
the flags of the configured competition classes instead. Any non-empty
cell in a class column means the model belongs to that class. Other
columns are ignored.
"""

import csv
import math
from .base import BaseAdapter
from ..core.models import Model


REQUIRED_COLUMNS = ['Model', 'Handicap']
FLAG_COLUMNS = ['18', '15', 'Std', 'Club', 'Double']


class CompetitionAdapter(BaseAdapter):
    """Parse a competition roster CSV into Model records."""

    def __init__(self, flag_columns: list[str] | None = None):
        self.flag_columns = list(flag_columns if flag_columns is not None else FLAG_COLUMNS)

    def parse(self, data_path: str) -> list[Model]:
        models = []
        with open(data_path, 'r', encoding='utf-8-sig', newline='') as f:
            reader = csv.DictReader(f)
            header = [h.strip() for h in (reader.fieldnames or [])]
            missing = [c for c in REQUIRED_COLUMNS + self.flag_columns
                       if c not in header]
            if missing:
                raise ValueError(
                    f"{data_path}: missing required column(s): {', '.join(missing)}")
            reader.fieldnames = header

            for row in reader:
                name = (row.get('Model') or '').strip()
                handicap_raw = (row.get('Handicap') or '').strip()
                if not name and not handicap_raw:
                    continue
                if not name:
                    raise ValueError(f"Line {reader.line_num}: empty model name")
                models.append(Model(
                    name=name,
                    handicap=self._parse_handicap(handicap_raw, reader.line_num),
                    class_flags=frozenset(
                        c for c in self.flag_columns if (row.get(c) or '').strip()),
                ))
        return models

    @staticmethod
    def _parse_handicap(val: str, line: int) -> float:
        try:
            v = float(val)
        except ValueError:
            raise ValueError(f"Line {line}: failed to parse handicap {val!r}")
        if not math.isfinite(v) or v <= 0:
            raise ValueError(f"Line {line}: handicap must be a positive number, got {val!r}")
        return v
