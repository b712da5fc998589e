"""Competition eligibility lists.

For each competition class the members at or above the cutoff are kept,
in roster order, and their handicap is divided by the class reference.
The cutoff is always checked against the raw handicap.
"""

from .models import ClassSpec, CompetitionClass


def classify(models, spec: ClassSpec) -> CompetitionClass:
    """Build the eligibility list for one competition class."""
    entries = [m.with_handicap(m.handicap / spec.reference)
               for m in models
               if spec.matches(m) and m.handicap >= spec.cutoff]
    return CompetitionClass(
        title=spec.title,
        reference=spec.reference,
        cutoff=spec.cutoff,
        entries=entries,
    )


def classify_all(models, specs) -> list[CompetitionClass]:
    return [classify(models, spec) for spec in specs]
