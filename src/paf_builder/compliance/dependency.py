"""H-1B dependency thresholds and exemption evaluation (20 CFR 655.736-737)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

WAGE_EXEMPTION_THRESHOLD = 60_000

SMALL_EMPLOYER_MAX_FTE = 25
SMALL_EMPLOYER_MIN_H1B = 8
MID_EMPLOYER_MAX_FTE = 50
MID_EMPLOYER_MIN_H1B = 13
LARGE_EMPLOYER_MIN_RATIO = 0.15

THRESHOLD_DESCRIPTIONS: list[str] = [
    "25 or fewer FTEs: 8 or more H-1B workers",
    "26 to 50 FTEs: 13 or more H-1B workers",
    "51 or more FTEs: 15% or more of workforce are H-1B workers",
]


@dataclass(frozen=True)
class DependencyAssessment:
    """Worksheet figures computed from FTE and H-1B counts.

    ``stated_dependent`` is the caller's authoritative answer; the computed
    ``meets_threshold`` is only ever displayed next to it.
    """

    total_fte: int
    total_h1b: int
    percentage: float
    band: str
    meets_threshold: bool
    stated_dependent: bool

    @property
    def discrepancy(self) -> bool:
        return self.meets_threshold != self.stated_dependent


@dataclass(frozen=True)
class ExemptionResult:
    exemption_type: Optional[str]
    annualized_wage: float
    is_wage_exempt: bool
    is_degree_exempt: bool

    @property
    def is_exempt(self) -> bool:
        return self.is_wage_exempt or self.is_degree_exempt

    @property
    def basis(self) -> str:
        if self.is_wage_exempt:
            return "wage-based"
        if self.is_degree_exempt:
            return "degree-based"
        return ""


def meets_dependency_threshold(total_fte: int, total_h1b: int) -> bool:
    if total_fte <= SMALL_EMPLOYER_MAX_FTE:
        return total_h1b >= SMALL_EMPLOYER_MIN_H1B
    if total_fte <= MID_EMPLOYER_MAX_FTE:
        return total_h1b >= MID_EMPLOYER_MIN_H1B
    return total_h1b / total_fte >= LARGE_EMPLOYER_MIN_RATIO


def threshold_band(total_fte: int) -> str:
    if total_fte <= SMALL_EMPLOYER_MAX_FTE:
        return THRESHOLD_DESCRIPTIONS[0]
    if total_fte <= MID_EMPLOYER_MAX_FTE:
        return THRESHOLD_DESCRIPTIONS[1]
    return THRESHOLD_DESCRIPTIONS[2]


def assess_dependency(
    total_fte: int,
    total_h1b: int,
    stated_dependent: bool,
) -> DependencyAssessment:
    """Compute the dependency worksheet for the given headcounts."""
    percentage = (total_h1b / total_fte * 100) if total_fte > 0 else 0.0
    return DependencyAssessment(
        total_fte=total_fte,
        total_h1b=total_h1b,
        percentage=percentage,
        band=threshold_band(total_fte),
        meets_threshold=meets_dependency_threshold(total_fte, total_h1b),
        stated_dependent=stated_dependent,
    )


def evaluate_exemption(exemption_type: Optional[str], annualized_wage: float) -> ExemptionResult:
    """Decide whether an H-1B worker is exempt from the additional attestations."""
    return ExemptionResult(
        exemption_type=exemption_type,
        annualized_wage=annualized_wage,
        is_wage_exempt=exemption_type == "wage" and annualized_wage >= WAGE_EXEMPTION_THRESHOLD,
        is_degree_exempt=exemption_type == "degree",
    )


def requires_recruitment_summary(is_dependent: bool, exemption_type: Optional[str]) -> bool:
    """A recruitment summary is owed only by dependent employers filing for non-exempt workers."""
    return is_dependent is True and exemption_type == "none"
