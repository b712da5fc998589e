"""Change highlighting for handicap list rows.

A row is flagged when it is new in this edition (its id lies beyond the
last id of the prior edition) or when its handicap differs from the
handicap recorded in the prior edition. The threshold comes from a
ChangePolicy so that each edition carries its own boundary.
"""

from .models import ChangePolicy, Model, RosterRow


def is_changed(row_id: int, handicap, previous_handicap,
               policy: ChangePolicy) -> bool:
    """Return True if the row should be highlighted under ``policy``."""
    if policy.new_after_id is not None and row_id > policy.new_after_id:
        return True
    return handicap != previous_handicap


def apply_policy(rows: list[RosterRow], policy: ChangePolicy) -> list[Model]:
    """Turn raw roster rows into Models with the highlight flag set."""
    models = []
    for row in rows:
        models.append(Model(
            name=row.name,
            handicap=row.handicap,
            class_flags=frozenset([row.class_flag]),
            highlight=is_changed(row.id, row.handicap,
                                 row.previous_handicap, policy),
        ))
    return models


def count_changed(models: list[Model]) -> int:
    """Number of models flagged as changed or new."""
    return sum(1 for m in models if m.highlight)
