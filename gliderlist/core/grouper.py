"""Group the roster by class and handicap for the full handicap list.

Each class of the catalog becomes a section, in catalog order. Inside a
section models sharing the exact same raw handicap form a bucket. Buckets
run from the highest handicap down, and names within a bucket are sorted
by plain code-point order so the output never depends on the locale.
"""

from collections import defaultdict
from typing import NamedTuple


class Bucket(NamedTuple):
    handicap: float
    entries: list


class ClassSection(NamedTuple):
    label: str
    buckets: list


def _sort_key(model):
    # Duplicate names: unflagged entry first
    return (model.name, model.highlight)


def group_class(models, flag: str) -> list[Bucket]:
    """Bucket the members of one class, highest handicap first."""
    by_handicap = defaultdict(list)
    for model in models:
        if flag in model.class_flags:
            by_handicap[model.handicap].append(model)

    buckets = []
    for handicap in sorted(by_handicap, reverse=True):
        entries = sorted(by_handicap[handicap], key=_sort_key)
        buckets.append(Bucket(handicap, entries))
    return buckets


def group(models, class_catalog) -> list[ClassSection]:
    """Build the class -> handicap -> models structure.

    Args:
        models: Sequence of Model records. Not modified.
        class_catalog: Ordered (flag, label) pairs.

    Returns:
        One ClassSection per catalog entry, in catalog order. A class
        without members has an empty bucket list.
    """
    return [ClassSection(label, group_class(models, flag))
            for flag, label in class_catalog]
