"""Wage arithmetic: annualization, binding wage, level tables and display helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from paf_builder.models import (
    Job,
    SecondaryWageInfo,
    WageInfo,
    WageLevel,
    WageLevelData,
    WageUnit,
    Worksite,
)

log = logging.getLogger(__name__)

HOURS_PER_YEAR = 2080

ANNUAL_FACTORS: dict[WageUnit, int] = {
    WageUnit.HOUR: HOURS_PER_YEAR,
    WageUnit.WEEK: 52,
    WageUnit.BI_WEEKLY: 26,
    WageUnit.MONTH: 12,
    WageUnit.YEAR: 1,
}

# Pinned business-policy approximation used when OFLC level data is missing.
LEVEL_RATIOS: dict[str, float] = {
    WageLevel.LEVEL_I.value: 0.785,
    WageLevel.LEVEL_II.value: 1.0,
    WageLevel.LEVEL_III.value: 1.215,
    WageLevel.LEVEL_IV.value: 1.43,
}

LEVEL_ORDER: list[str] = list(LEVEL_RATIOS)


@dataclass(frozen=True)
class LevelRow:
    """One row of a derived wage-level table."""

    level: str
    hourly: float
    annual: float


def annualize(amount: float, unit: WageUnit | str) -> float:
    """Convert *amount* quoted per *unit* to a yearly figure."""
    return amount * ANNUAL_FACTORS[WageUnit(unit)]


def deannualize(annual: float, unit: WageUnit | str) -> float:
    """Convert a yearly figure back to an amount per *unit*."""
    return annual / ANNUAL_FACTORS[WageUnit(unit)]


def binding_wage(
    actual: float,
    prevailing: float,
    secondary_prevailing: Optional[float] = None,
) -> float:
    """Return the legally required wage: the highest of the supplied figures.

    All arguments must already be in the same unit (normally annual).
    """
    candidates = [actual, prevailing]
    if secondary_prevailing is not None:
        candidates.append(secondary_prevailing)
    return max(candidates)


def level_table(
    selected_level: str,
    prevailing_wage: float,
    unit: WageUnit | str,
    authoritative: Optional[WageLevelData] = None,
) -> list[LevelRow]:
    """Build the four-level wage table for a prevailing wage determination.

    Authoritative figures are used as-is when all four annual amounts are
    present. Otherwise every level is scaled from the prevailing wage using
    :data:`LEVEL_RATIOS` relative to *selected_level*; an unrecognized level
    is treated as ratio 1.0.
    """
    if authoritative is not None:
        figures = authoritative.as_list()
        if all(f.annual is not None for f in figures):
            return [
                LevelRow(
                    level=level,
                    hourly=f.hourly if f.hourly is not None else f.annual / HOURS_PER_YEAR,
                    annual=f.annual,
                )
                for level, f in zip(LEVEL_ORDER, figures)
            ]

    base_annual = annualize(prevailing_wage, unit)
    selected_ratio = LEVEL_RATIOS.get(selected_level, 1.0)
    rows = []
    for level, ratio in LEVEL_RATIOS.items():
        annual = base_annual * ratio / selected_ratio
        rows.append(LevelRow(level=level, hourly=annual / HOURS_PER_YEAR, annual=annual))
    return rows


def is_monotonic(rows: list[LevelRow]) -> bool:
    return all(a.annual <= b.annual for a, b in zip(rows, rows[1:]))


def wage_source_date(begin_date: Optional[str], today: Optional[date] = None) -> str:
    """Return July 1 of the year before the employment begin year.

    OFLC publishes its wage year on July 1, so the data in force for a
    position is the release dated July 1 of the prior year. Falls back to
    the current year when *begin_date* is absent or not an ISO date.
    """
    year = (today or date.today()).year
    if begin_date:
        try:
            year = parse_iso_date(begin_date).year
        except ValueError:
            log.warning("Unreadable begin date %r; using the current wage year", begin_date)
    return date(year - 1, 7, 1).isoformat()


# ── Display helpers ──────────────────────────────────────────────────


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string (a time component is ignored)."""
    return datetime.strptime(value[:10], "%Y-%m-%d").date()


def format_date(value: Optional[str]) -> str:
    """Render an ISO date as ``October 1, 2025``; other strings pass through."""
    if not value:
        return ""
    try:
        parsed = parse_iso_date(value)
    except ValueError:
        return value
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def format_currency(amount: float, unit: WageUnit | str | None = None) -> str:
    """Render ``$90,000`` for whole amounts and ``$45.50`` otherwise."""
    if float(amount).is_integer():
        text = f"${amount:,.0f}"
    else:
        text = f"${amount:,.2f}"
    if unit is not None:
        text += f" / {WageUnit(unit).value}"
    return text


# ── Position wage summary ────────────────────────────────────────────


@dataclass(frozen=True)
class WageSummary:
    """Annualized wage figures for one position and the binding result."""

    offered: float
    actual: float
    prevailing: float
    secondary_prevailing: Optional[float]
    binding: float

    @property
    def binding_source(self) -> str:
        if self.binding == max(self.offered, self.actual):
            return "actual wage"
        if self.secondary_prevailing is not None and self.binding == self.secondary_prevailing:
            return "secondary prevailing wage"
        return "prevailing wage"

    @property
    def offered_below_binding(self) -> bool:
        return self.offered < self.binding


def summarize_wages(
    job: Job,
    wage: WageInfo,
    worksite: Worksite | None = None,
) -> WageSummary:
    """Annualize every wage figure on a case and compute the binding wage.

    The secondary prevailing wage only counts when the worksite actually has
    a secondary location and a secondary wage was recorded for it.
    """
    offered = annualize(job.wage_rate_from, job.wage_unit)
    actual = annualize(wage.actual_wage, wage.actual_wage_unit) if wage.actual_wage else 0.0
    prevailing = annualize(wage.prevailing_wage, wage.prevailing_wage_unit)
    secondary: Optional[float] = None
    secondary_wage = applicable_secondary_wage(wage, worksite)
    if secondary_wage is not None:
        secondary = annualize(secondary_wage.prevailing_wage, secondary_wage.prevailing_wage_unit)
    return WageSummary(
        offered=offered,
        actual=actual,
        prevailing=prevailing,
        secondary_prevailing=secondary,
        binding=binding_wage(max(offered, actual), prevailing, secondary),
    )


def applicable_secondary_wage(
    wage: WageInfo, worksite: Worksite | None
) -> SecondaryWageInfo | None:
    if worksite is None or worksite.secondary is None:
        return None
    if wage.has_secondary_wage and wage.secondary_wage is not None:
        return wage.secondary_wage
    return None
