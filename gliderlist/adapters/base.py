"""Abstract base adapter for reading glider rosters."""

from abc import ABC, abstractmethod


class BaseAdapter(ABC):
    @abstractmethod
    def parse(self, data_path: str) -> list:
        """Parse a roster file.

        Returns RosterRow records (handicap list sources) or Model records
        (competition sources). Malformed input raises ValueError with the
        offending line and column.
        """
        pass
