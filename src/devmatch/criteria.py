"""Static criterion table used to score developers against an ICP."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Tuple

from .exceptions import InvalidCriteriaError

# Numeric thresholds give partial credit to values just below the minimum.
PROXIMITY_BAND = 2
PROXIMITY_CREDIT = 0.5


class CriterionKind(str, Enum):
    """Comparison semantics for a criterion."""

    SET = "set"
    SINGLE_VALUE = "single-value"
    NUMERIC_THRESHOLD = "numeric-threshold"


@dataclass(frozen=True)
class Criterion:
    """One scored dimension of the ideal customer profile."""

    target_field: str
    candidate_field: str
    label: str
    weight: float
    kind: CriterionKind


CRITERIA: Tuple[Criterion, ...] = (
    # Core
    Criterion("role_types", "role_types", "Role Types", 20, CriterionKind.SET),
    Criterion("seniority_levels", "seniority", "Seniority", 15, CriterionKind.SINGLE_VALUE),
    Criterion("languages", "languages", "Languages", 15, CriterionKind.SET),
    Criterion(
        "min_experience", "years_experience", "Experience", 10, CriterionKind.NUMERIC_THRESHOLD
    ),
    # Secondary
    Criterion("frameworks", "frameworks", "Frameworks", 8, CriterionKind.SET),
    Criterion("industries", "industries", "Industries", 6, CriterionKind.SET),
    Criterion("databases", "databases", "Databases", 5, CriterionKind.SET),
    Criterion("cloud_platforms", "cloud_platforms", "Cloud Platforms", 3, CriterionKind.SET),
    Criterion(
        "buying_influence", "buying_influence", "Buying Influence", 3, CriterionKind.SINGLE_VALUE
    ),
    # Peripheral
    Criterion("company_size_range", "company_size", "Company Size", 2, CriterionKind.SINGLE_VALUE),
    Criterion("devops_tools", "devops_tools", "DevOps Tools", 2, CriterionKind.SET),
    Criterion("cicd_tools", "cicd_tools", "CI/CD Tools", 2, CriterionKind.SET),
    Criterion("testing_frameworks", "testing_frameworks", "Testing", 2, CriterionKind.SET),
    Criterion("api_experience", "api_experience", "API Experience", 2, CriterionKind.SET),
    Criterion("operating_systems", "operating_systems", "OS", 1, CriterionKind.SET),
    Criterion("paid_tools", "paid_tools", "Paid Tools", 2, CriterionKind.SET),
    Criterion(
        "open_source_activity",
        "open_source_activity",
        "Open Source",
        2,
        CriterionKind.SINGLE_VALUE,
    ),
)


def total_weight(criteria: Iterable[Criterion]) -> float:
    return sum(criterion.weight for criterion in criteria)


def validate_criteria(criteria: Sequence[Criterion]) -> Tuple[Criterion, ...]:
    """Check that a criterion table can be used for weighted scoring.

    Returns the table as a tuple so callers can keep an immutable copy.

    Raises:
        InvalidCriteriaError: if the table is empty, a weight is not
            positive, or a target field appears twice.
    """

    table = tuple(criteria)
    if not table:
        raise InvalidCriteriaError("criterion table must not be empty")

    seen = set()
    for criterion in table:
        if criterion.weight <= 0:
            raise InvalidCriteriaError(
                f"criterion {criterion.label!r} must have a positive weight"
            )
        if criterion.target_field in seen:
            raise InvalidCriteriaError(
                f"target field {criterion.target_field!r} is defined more than once"
            )
        seen.add(criterion.target_field)
    return table


validate_criteria(CRITERIA)


__all__ = [
    "CRITERIA",
    "Criterion",
    "CriterionKind",
    "PROXIMITY_BAND",
    "PROXIMITY_CREDIT",
    "total_weight",
    "validate_criteria",
]
