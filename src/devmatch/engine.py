"""Core ICP matching logic for devmatch."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Collection, List, Optional, Sequence, Tuple, Union

from .criteria import (
    CRITERIA,
    PROXIMITY_BAND,
    PROXIMITY_CREDIT,
    Criterion,
    CriterionKind,
    total_weight,
    validate_criteria,
)
from .exceptions import InvalidLimitError
from .models import DeveloperMatch, DeveloperProfile, MatchDetail, TargetCriteria
from .values import (
    NumericValue,
    SetValue,
    as_numeric_value,
    as_set_value,
    as_single_value,
    format_number,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20

TargetValue = Union[SetValue, NumericValue]


@dataclass(frozen=True)
class ActiveCriterion:
    """A criterion constrained by the target, with its rescaled weight."""

    criterion: Criterion
    target_value: TargetValue
    effective_weight: float


@dataclass
class ScoredDeveloper:
    """Internal representation that couples a developer with the raw score."""

    developer: DeveloperProfile
    total_earned: float
    details: List[MatchDetail]

    @property
    def score(self) -> int:
        return round_half_up(self.total_earned)


class MatchingEngine:
    """Ranks developers against a project's ideal customer profile.

    Only criteria the target actually configures take part in a scoring
    pass. Their static weights are rescaled to sum to 100 so that a developer
    who satisfies everything asked for scores 100, however sparse the target.
    """

    def __init__(self, criteria: Optional[Sequence[Criterion]] = None) -> None:
        self.criteria = validate_criteria(CRITERIA if criteria is None else criteria)

    def score_and_rank(
        self,
        target: TargetCriteria,
        candidates: Sequence[DeveloperProfile],
        exclude_ids: Collection[str] = (),
        *,
        limit: int = DEFAULT_LIMIT,
    ) -> List[DeveloperMatch]:
        """Return the best matching developers for ``target``.

        Args:
            target: Criteria configured on the project.
            candidates: Developer pool to evaluate.
            exclude_ids: Developer ids to skip, e.g. developers already invited.
            limit: Maximum number of matches to return.

        Returns:
            Matches with a positive score, best first. Developers with equal
            scores keep their relative order from ``candidates``.

        Raises:
            InvalidLimitError: if ``limit`` is not a positive integer.
        """

        _check_limit(limit)

        active = self.active_criteria(target)
        if not active:
            logger.debug("No ICP criteria configured, skipping %d candidates", len(candidates))
            return []

        excluded = set(exclude_ids)
        scored: List[ScoredDeveloper] = []
        for developer in candidates:
            if developer.id in excluded:
                continue
            result = self._score_developer(developer, active)
            if result.score > 0:
                scored.append(result)

        scored.sort(key=lambda match: match.score, reverse=True)
        logger.debug(
            "Scored %d candidates on %d criteria, %d matched",
            len(candidates),
            len(active),
            len(scored),
        )
        return [
            DeveloperMatch(
                developer=match.developer,
                score=match.score,
                breakdown=sorted(match.details, key=lambda detail: detail.earned, reverse=True),
            )
            for match in scored[:limit]
        ]

    def active_criteria(self, target: TargetCriteria) -> List[ActiveCriterion]:
        """Criteria the target configures, with weights rescaled to sum to 100."""
        configured: List[Tuple[Criterion, TargetValue]] = []
        for criterion in self.criteria:
            raw = getattr(target, criterion.target_field, None)
            if criterion.kind is CriterionKind.NUMERIC_THRESHOLD:
                minimum = as_numeric_value(raw)
                if not minimum.is_absent and minimum.value > 0:
                    configured.append((criterion, minimum))
            else:
                accepted = as_set_value(raw)
                if not accepted.is_absent:
                    configured.append((criterion, accepted))

        if not configured:
            return []

        scale = 100 / total_weight(criterion for criterion, _ in configured)
        logger.debug("Active criteria %s, scale %.4f", [c.label for c, _ in configured], scale)
        return [
            ActiveCriterion(
                criterion=criterion,
                target_value=value,
                effective_weight=criterion.weight * scale,
            )
            for criterion, value in configured
        ]

    def _score_developer(
        self, developer: DeveloperProfile, active: Sequence[ActiveCriterion]
    ) -> ScoredDeveloper:
        details: List[MatchDetail] = []
        total_earned = 0.0
        for item in active:
            criterion = item.criterion
            raw = getattr(developer, criterion.candidate_field, None)
            if criterion.kind is CriterionKind.SET:
                earned, matched, total = self._set_score(item, raw)
            elif criterion.kind is CriterionKind.SINGLE_VALUE:
                earned, matched, total = self._single_value_score(item, raw)
            else:
                earned, matched, total = self._threshold_score(item, raw)

            if earned > 0:
                details.append(
                    MatchDetail(
                        category=criterion.candidate_field,
                        label=criterion.label,
                        matched=matched,
                        total=total,
                        weight=round_half_up(item.effective_weight),
                        earned=round_half_up(earned * 10) / 10,
                    )
                )
            total_earned += earned
        return ScoredDeveloper(developer=developer, total_earned=total_earned, details=details)

    def _set_score(self, item: ActiveCriterion, raw: object) -> Tuple[float, List[str], int]:
        accepted = item.target_value
        matched = list(accepted.overlap(as_set_value(raw)))
        total = len(accepted.values)
        earned = item.effective_weight * (len(matched) / total) if total else 0.0
        return earned, matched, total

    def _single_value_score(
        self, item: ActiveCriterion, raw: object
    ) -> Tuple[float, List[str], int]:
        accepted = item.target_value
        value = as_single_value(raw)
        total = len(accepted.values)
        if value.is_in(accepted):
            return item.effective_weight, [value.value], total
        return 0.0, [], total

    def _threshold_score(self, item: ActiveCriterion, raw: object) -> Tuple[float, List[str], int]:
        minimum = item.target_value.value
        years = as_numeric_value(raw)
        if years.is_absent:
            return 0.0, [], 1
        if years.value >= minimum:
            return item.effective_weight, [f"{format_number(years.value)} yrs"], 1
        if years.value >= minimum - PROXIMITY_BAND:
            return (
                item.effective_weight * PROXIMITY_CREDIT,
                [f"{format_number(years.value)} yrs (close)"],
                1,
            )
        return 0.0, [], 1


_default_engine = MatchingEngine()


def score_and_rank(
    target: TargetCriteria,
    candidates: Sequence[DeveloperProfile],
    exclude_ids: Collection[str] = (),
    *,
    limit: int = DEFAULT_LIMIT,
) -> List[DeveloperMatch]:
    """Score ``candidates`` with the default criterion table."""
    return _default_engine.score_and_rank(target, candidates, exclude_ids, limit=limit)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def _check_limit(limit: int) -> None:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidLimitError(f"limit must be a positive integer, got {limit!r}")


__all__ = ["DEFAULT_LIMIT", "MatchingEngine", "round_half_up", "score_and_rank"]
