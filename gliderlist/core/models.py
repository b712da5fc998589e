"""Data models for the glider handicap list system."""

import math
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Model:
    """One glider type from the roster."""
    name: str                       # "LS8", "ASW 20"
    handicap: float                 # int for the DMSt list, float for competitions
    class_flags: frozenset = frozenset()  # {"15", "Standard"}
    highlight: bool = False         # changed or new since the prior edition

    def with_handicap(self, handicap: float) -> 'Model':
        return replace(self, handicap=handicap)


@dataclass(frozen=True)
class RosterRow:
    """A raw handicap list row before the change policy is applied."""
    id: int
    name: str
    class_flag: str
    handicap: int
    previous_handicap: int


@dataclass(frozen=True)
class ClassSpec:
    """Definition of one competition class."""
    title: str          # "15m Klasse"
    reference: float    # handicap that rescales to 1.0
    cutoff: float       # minimum raw handicap (inclusive)
    flag: str           # class flag selecting the members

    def __post_init__(self):
        if not math.isfinite(self.cutoff):
            raise ValueError(
                f"Competition class '{self.title}': cutoff must be finite, got {self.cutoff}")
        if not math.isfinite(self.reference) or self.reference <= 0:
            raise ValueError(
                f"Competition class '{self.title}': reference must be positive, "
                f"got {self.reference}")

    def matches(self, model: Model) -> bool:
        return self.flag in model.class_flags


@dataclass
class CompetitionClass:
    """Eligible, rescaled entries of one competition class."""
    title: str
    reference: float
    cutoff: float
    entries: list = field(default_factory=list)


@dataclass(frozen=True)
class ChangePolicy:
    """Rules deciding which rows are highlighted as changed.

    A row is new when its id is beyond ``new_after_id`` (the last id of the
    prior edition). Without a threshold only handicap changes count.
    """
    edition: str = ''                 # "2023"
    new_after_id: int | None = None   # 593 for the 2023 list


@dataclass
class ReportConfig:
    """Configuration for a single report run."""
    title: str = ''                 # "DMSt Indexliste 2023"
    year: str = ''
    class_catalog: list = field(default_factory=list)        # [(flag, label), ...]
    competition_classes: list = field(default_factory=list)  # [ClassSpec, ...]
    change_policy: ChangePolicy = field(default_factory=ChangePolicy)
