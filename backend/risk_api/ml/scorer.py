"""Heuristic risk scorer — rule-based, no trained artifact.

Additive point scoring over a handful of affordability ratios and applicant
attributes. Stands in for the external gradient-boosted model, so the result
is only a placeholder default probability.

Order of operations: raw score -> clamp to [0, 0.4] -> add noise. The noise
is added after the clamp, so the final probability can land in
[-amplitude, 0.4 + amplitude] unless clamp_after_noise is set.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from risk_api.ml.noise import NoiseSource, UniformNoise
from risk_api.models.applicant import ApplicantData

logger = logging.getLogger(__name__)

SCORE_FLOOR = 0.0
SCORE_CEILING = 0.4

# (threshold, adjustment), highest threshold first; first match wins
_CREDIT_TO_INCOME_STEPS = [(3.0, 0.08), (2.0, 0.05), (1.0, 0.03)]
_DEBT_TO_INCOME_STEPS = [(0.5, 0.06), (0.3, 0.03)]

_YOUNG_AGE = 25
_SENIOR_AGE = 60
_YOUNG_ADJ = 0.04
_SENIOR_ADJ = 0.02

_NEW_JOB_YEARS = 1
_SHORT_TENURE_YEARS = 3
_LONG_TENURE_YEARS = 10
_NEW_JOB_ADJ = 0.05
_SHORT_TENURE_ADJ = 0.03
_LONG_TENURE_ADJ = -0.02

_REVOLVING_ADJ = 0.02
_REVOLVING_CONTRACT = "Revolving loans"

_EDUCATION_ADJ = {
    "Academic degree": -0.02,
    "Higher education": -0.02,
    "Lower secondary": 0.02,
}


@dataclass(frozen=True)
class RiskRatios:
    credit_to_income: float
    annuity_to_income: float  # not scored, kept for logging
    debt_to_income: float


@dataclass(frozen=True)
class ScoreBreakdown:
    ratios: RiskRatios
    raw_score: float
    base_probability: float
    noise: float
    probability: float


def compute_ratios(income: float, credit: float, annuity: float) -> RiskRatios:
    """Derive affordability ratios. Income must be non-zero."""
    return RiskRatios(
        credit_to_income=credit / income,
        annuity_to_income=annuity / income,
        debt_to_income=(annuity * 12) / income,
    )


def _step_adjustment(value: float, steps: list[tuple[float, float]]) -> float:
    for threshold, adjustment in steps:
        if value > threshold:
            return adjustment
    return 0.0


def raw_score(applicant: ApplicantData, ratios: RiskRatios) -> float:
    """Sum every rule adjustment that applies. Gender is not scored."""
    score = 0.0
    score += _step_adjustment(ratios.credit_to_income, _CREDIT_TO_INCOME_STEPS)
    score += _step_adjustment(ratios.debt_to_income, _DEBT_TO_INCOME_STEPS)

    if applicant.age < _YOUNG_AGE:
        score += _YOUNG_ADJ
    elif applicant.age > _SENIOR_AGE:
        score += _SENIOR_ADJ

    if applicant.employment_years < _NEW_JOB_YEARS:
        score += _NEW_JOB_ADJ
    elif applicant.employment_years < _SHORT_TENURE_YEARS:
        score += _SHORT_TENURE_ADJ
    elif applicant.employment_years > _LONG_TENURE_YEARS:
        score += _LONG_TENURE_ADJ

    if applicant.contract_type == _REVOLVING_CONTRACT:
        score += _REVOLVING_ADJ

    score += _EDUCATION_ADJ.get(applicant.education, 0.0)
    return score


def clamp(score: float, low: float = SCORE_FLOOR, high: float = SCORE_CEILING) -> float:
    return max(low, min(high, score))


class RiskScorer:
    """Scores applicants with the rule table plus an injected perturbation."""

    def __init__(
        self,
        noise: NoiseSource | None = None,
        clamp_after_noise: bool = False,
    ) -> None:
        self.noise = noise if noise is not None else UniformNoise()
        self.clamp_after_noise = clamp_after_noise

    def score(self, applicant: ApplicantData) -> ScoreBreakdown:
        ratios = compute_ratios(
            applicant.annual_income, applicant.credit_amount, applicant.annuity
        )
        raw = raw_score(applicant, ratios)
        base = clamp(raw)
        noise = self.noise()
        probability = base + noise
        if self.clamp_after_noise:
            probability = clamp(probability, 0.0, 1.0)

        logger.debug(
            "Scored applicant: credit_to_income=%.4f annuity_to_income=%.4f "
            "debt_to_income=%.4f raw=%.4f base=%.4f noise=%.4f",
            ratios.credit_to_income,
            ratios.annuity_to_income,
            ratios.debt_to_income,
            raw,
            base,
            noise,
        )
        return ScoreBreakdown(
            ratios=ratios,
            raw_score=raw,
            base_probability=base,
            noise=noise,
            probability=probability,
        )
