"""Data models for the devmatch ICP matching engine."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

StringValues = Optional[List[str]]
# Profile fields are read through devmatch.values, which treats anything
# unreadable as absent.
LooseValue = Any


def _strip_and_dedupe(values: Optional[List[str]]) -> Optional[List[str]]:
    if values is None:
        return None
    if not isinstance(values, list):
        return values
    seen = set()
    ordered_unique = []
    for item in values:
        normalized = item.strip() if isinstance(item, str) else item
        if isinstance(normalized, str) and normalized:
            key = normalized.lower()
            if key not in seen:
                ordered_unique.append(normalized)
                seen.add(key)
    return ordered_unique


class TargetCriteria(BaseModel):
    """Ideal customer profile configured on a project.

    Every field is optional. An unset or empty field does not constrain
    matching and is left out of the scoring pass entirely.
    """

    role_types: StringValues = Field(default=None, description="Accepted role types")
    seniority_levels: StringValues = Field(
        default=None, description="Accepted seniority levels, one must match exactly"
    )
    languages: StringValues = Field(default=None, description="Programming languages")
    min_experience: Optional[float] = Field(
        default=None, description="Minimum years of professional experience, inactive unless positive"
    )
    frameworks: StringValues = Field(default=None)
    industries: StringValues = Field(default=None)
    databases: StringValues = Field(default=None)
    cloud_platforms: StringValues = Field(default=None)
    buying_influence: StringValues = Field(default=None)
    company_size_range: StringValues = Field(default=None)
    devops_tools: StringValues = Field(default=None)
    cicd_tools: StringValues = Field(default=None)
    testing_frameworks: StringValues = Field(default=None)
    api_experience: StringValues = Field(default=None)
    operating_systems: StringValues = Field(default=None)
    paid_tools: StringValues = Field(default=None)
    open_source_activity: StringValues = Field(default=None)

    @field_validator(
        "role_types",
        "seniority_levels",
        "languages",
        "frameworks",
        "industries",
        "databases",
        "cloud_platforms",
        "buying_influence",
        "company_size_range",
        "devops_tools",
        "cicd_tools",
        "testing_frameworks",
        "api_experience",
        "operating_systems",
        "paid_tools",
        "open_source_activity",
        mode="before",
    )
    def _normalize_values(values: Optional[List[str]]) -> Optional[List[str]]:
        return _strip_and_dedupe(values)


class DeveloperProfile(BaseModel):
    """A developer in the matching pool."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Stable unique identifier for the developer")
    full_name: Optional[str] = Field(default=None, description="Display name")
    job_title: Optional[str] = Field(default=None)
    role_types: LooseValue = None
    seniority: LooseValue = None
    languages: LooseValue = None
    years_experience: LooseValue = Field(
        default=None, description="Total years of professional experience"
    )
    frameworks: LooseValue = None
    industries: LooseValue = None
    databases: LooseValue = None
    cloud_platforms: LooseValue = None
    buying_influence: LooseValue = None
    company_size: LooseValue = None
    devops_tools: LooseValue = None
    cicd_tools: LooseValue = None
    testing_frameworks: LooseValue = None
    api_experience: LooseValue = None
    operating_systems: LooseValue = None
    paid_tools: LooseValue = None
    open_source_activity: LooseValue = None


class MatchDetail(BaseModel):
    """Contribution of one criterion to a developer's score."""

    category: str
    label: str
    matched: List[str]
    total: int
    weight: int
    earned: float


class DeveloperMatch(BaseModel):
    developer: DeveloperProfile
    score: int = Field(..., ge=0, le=100)
    breakdown: List[MatchDetail]


class AnonymizedDeveloper(BaseModel):
    descriptor: str
    experience: str
    top_skills: List[str]
    seniority: str


class MatchPreview(BaseModel):
    total_matches: int
    samples: List[AnonymizedDeveloper]


__all__ = [
    "AnonymizedDeveloper",
    "DeveloperMatch",
    "DeveloperProfile",
    "MatchDetail",
    "MatchPreview",
    "TargetCriteria",
]
