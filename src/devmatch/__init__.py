"""devmatch ICP matching engine package."""

from .criteria import CRITERIA, Criterion, CriterionKind
from .engine import MatchingEngine, score_and_rank
from .exceptions import DevmatchError, InvalidCriteriaError, InvalidLimitError
from .models import (
    AnonymizedDeveloper,
    DeveloperMatch,
    DeveloperProfile,
    MatchDetail,
    MatchPreview,
    TargetCriteria,
)
from .preview import match_preview

__all__ = [
    "AnonymizedDeveloper",
    "CRITERIA",
    "Criterion",
    "CriterionKind",
    "DevmatchError",
    "DeveloperMatch",
    "DeveloperProfile",
    "InvalidCriteriaError",
    "InvalidLimitError",
    "MatchDetail",
    "MatchPreview",
    "MatchingEngine",
    "TargetCriteria",
    "match_preview",
    "score_and_rank",
]
