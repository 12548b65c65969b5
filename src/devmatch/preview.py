"""Anonymised preview of the developers that fit an ICP.

Used before checkout to show a company how large its matching pool is
without exposing who is in it. Unlike :mod:`devmatch.engine`, filtering is
strict: a developer counts only if every configured criterion is met, and the
experience threshold has no proximity band.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .criteria import CriterionKind
from .engine import ActiveCriterion, MatchingEngine
from .labels import format_enum_label
from .models import AnonymizedDeveloper, DeveloperProfile, MatchPreview, TargetCriteria
from .values import as_numeric_value, as_set_value, as_single_value, format_number

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 6
MAX_TOP_SKILLS = 4

_engine = MatchingEngine()


def match_preview(
    target: TargetCriteria,
    candidates: Sequence[DeveloperProfile],
    *,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> MatchPreview:
    active = _engine.active_criteria(target)
    matching = [developer for developer in candidates if _meets_all(developer, active)]
    logger.debug("Preview matched %d of %d developers", len(matching), len(candidates))
    return MatchPreview(
        total_matches=len(matching),
        samples=[anonymize(developer) for developer in matching[: max(0, sample_size)]],
    )


def anonymize(developer: DeveloperProfile) -> AnonymizedDeveloper:
    """Describe a developer without anything that identifies them."""
    role_types = as_set_value(developer.role_types).values
    seniority = as_single_value(developer.seniority).value or "senior"
    primary_role = role_types[0] if role_types else "developer"

    seniority_label = format_enum_label(seniority)
    years = as_numeric_value(developer.years_experience).value

    languages = as_set_value(developer.languages).values[:3]
    frameworks = as_set_value(developer.frameworks).values[:2]
    top_skills = [format_enum_label(skill) for skill in (*languages, *frameworks)]

    return AnonymizedDeveloper(
        descriptor=f"{seniority_label} {format_enum_label(primary_role)} Engineer",
        experience=f"{format_number(years)} years" if years else "N/A",
        top_skills=top_skills[:MAX_TOP_SKILLS],
        seniority=seniority_label,
    )


def _meets_all(developer: DeveloperProfile, active: List[ActiveCriterion]) -> bool:
    for item in active:
        raw = getattr(developer, item.criterion.candidate_field, None)
        kind = item.criterion.kind
        if kind is CriterionKind.SET:
            if not item.target_value.overlap(as_set_value(raw)):
                return False
        elif kind is CriterionKind.SINGLE_VALUE:
            if not as_single_value(raw).is_in(item.target_value):
                return False
        else:
            years = as_numeric_value(raw)
            if years.is_absent or years.value < item.target_value.value:
                return False
    return True


__all__ = ["DEFAULT_SAMPLE_SIZE", "anonymize", "match_preview"]
