"""Tests for the heuristic scorer — rule table, boundaries, clamp, noise."""
import math
import random

import pytest

from risk_api.ml.noise import FixedNoise, UniformNoise, ZeroNoise
from risk_api.ml.scorer import (
    RiskScorer,
    clamp,
    compute_ratios,
    raw_score,
)
from risk_api.models.applicant import ApplicantData


def _applicant(**overrides) -> ApplicantData:
    """Neutral applicant: every rule contributes zero."""
    base = {
        "annual_income": 100_000,
        "credit_amount": 50_000,
        "annuity": 1_000,
        "age": 40,
        "employment_years": 5,
        "gender": "M",
        "contract_type": "Cash loans",
        "education": "Secondary / secondary special",
    }
    base.update(overrides)
    return ApplicantData(**base)


def _raw(applicant: ApplicantData) -> float:
    ratios = compute_ratios(applicant.annual_income, applicant.credit_amount, applicant.annuity)
    return raw_score(applicant, ratios)


# --- Ratios ---

def test_compute_ratios():
    ratios = compute_ratios(100_000, 250_000, 2_000)
    assert ratios.credit_to_income == pytest.approx(2.5)
    assert ratios.annuity_to_income == pytest.approx(0.02)
    assert ratios.debt_to_income == pytest.approx(0.24)


def test_neutral_applicant_scores_zero():
    assert _raw(_applicant()) == 0.0


# --- Rule table ---

@pytest.mark.parametrize(
    "credit, expected",
    [
        (350_000, 0.08),   # 3.5x income
        (300_000, 0.05),   # exactly 3.0 → only the >2 step
        (250_000, 0.05),
        (200_000, 0.03),   # exactly 2.0 → only the >1 step
        (150_000, 0.03),
        (100_000, 0.0),    # exactly 1.0 → nothing
    ],
)
def test_credit_to_income_steps(credit, expected):
    assert _raw(_applicant(credit_amount=credit)) == pytest.approx(expected)


@pytest.mark.parametrize(
    "annuity, expected",
    [
        (5_000, 0.06),    # DTI 0.6
        (4_000, 0.03),    # DTI 0.48
        (2_500, 0.0),     # DTI exactly 0.3
    ],
)
def test_debt_to_income_steps(annuity, expected):
    assert _raw(_applicant(annuity=annuity)) == pytest.approx(expected)


@pytest.mark.parametrize(
    "age, expected",
    [(20, 0.04), (25, 0.0), (60, 0.0), (61, 0.02)],
)
def test_age_adjustment(age, expected):
    assert _raw(_applicant(age=age)) == pytest.approx(expected)


@pytest.mark.parametrize(
    "years, expected",
    [(0, 0.05), (0.5, 0.05), (1, 0.03), (2.9, 0.03), (3, 0.0), (10, 0.0), (11, -0.02)],
)
def test_employment_adjustment(years, expected):
    assert _raw(_applicant(employment_years=years)) == pytest.approx(expected)


def test_debt_to_income_exactly_half_gets_lower_step():
    # 5000 * 12 / 120000 == 0.5 → only the >0.3 step
    assert _raw(_applicant(annual_income=120_000, annuity=5_000)) == pytest.approx(0.03)


def test_revolving_contract_adds_risk():
    assert _raw(_applicant(contract_type="Revolving loans")) == pytest.approx(0.02)


@pytest.mark.parametrize("contract", ["revolving", "REVOLVING LOANS", " Revolving loans", "Cash loans"])
def test_contract_type_matched_exactly(contract):
    assert _raw(_applicant(contract_type=contract)) == 0.0


@pytest.mark.parametrize(
    "education, expected",
    [
        ("Academic degree", -0.02),
        ("Higher education", -0.02),
        ("Lower secondary", 0.02),
        ("Incomplete higher", 0.0),
        ("Secondary / secondary special", 0.0),
        ("Something else", 0.0),
        ("higher education", 0.0),
        ("LOWER SECONDARY", 0.0),
    ],
)
def test_education_adjustment(education, expected):
    assert _raw(_applicant(education=education)) == pytest.approx(expected)


def test_gender_is_not_scored():
    assert _raw(_applicant(gender="M")) == _raw(_applicant(gender="F"))


def test_raw_score_is_sum_of_rules():
    """Stacked adjustments equal the sum of each applied on its own."""
    overrides = [
        {"credit_amount": 350_000},
        {"annuity": 5_000},
        {"age": 20},
        {"employment_years": 0},
        {"contract_type": "Revolving loans"},
        {"education": "Lower secondary"},
    ]
    individual = sum(_raw(_applicant(**o)) for o in overrides)
    combined = {}
    for o in overrides:
        combined.update(o)
    assert _raw(_applicant(**combined)) == pytest.approx(individual)
    assert individual == pytest.approx(0.27)


# --- Clamp ---

@pytest.mark.parametrize("score", [-0.5, -0.02, 0.0, 0.13, 0.4, 0.41, 2.0])
def test_clamp_bounds(score):
    assert clamp(score) == max(0.0, min(0.4, score))


# --- Scenarios ---

def test_median_applicant_scenario():
    applicant = ApplicantData(
        annual_income=147150, credit_amount=599025, annuity=27108, age=35,
        employment_years=5, gender="F", contract_type="Cash loans",
        education="Higher education",
    )
    result = RiskScorer(noise=ZeroNoise()).score(applicant)
    assert result.ratios.credit_to_income == pytest.approx(4.0708, abs=1e-4)
    # annualised annuity is 2.2x income
    assert result.ratios.debt_to_income == pytest.approx(2.2106, abs=1e-4)
    # credit +0.08, debt +0.06, higher education -0.02
    assert result.raw_score == pytest.approx(0.12)
    assert result.base_probability == pytest.approx(0.12)
    assert result.probability == pytest.approx(0.12)


def test_high_risk_profile_scores_above_baseline():
    risky = ApplicantData(
        annual_income=100000, credit_amount=50000, annuity=2000, age=20,
        employment_years=0, gender="M", contract_type="Revolving loans",
        education="Lower secondary",
    )
    scorer = RiskScorer(noise=ZeroNoise())
    risky_result = scorer.score(risky)
    baseline_result = scorer.score(_applicant())
    # age +0.04, employment +0.05, revolving +0.02, education +0.02
    assert risky_result.raw_score == pytest.approx(0.13)
    assert risky_result.probability > baseline_result.probability


# --- Noise ---

def test_fixed_noise_is_deterministic():
    scorer = RiskScorer(noise=FixedNoise(0.005))
    applicant = _applicant(age=20)
    first = scorer.score(applicant)
    second = scorer.score(applicant)
    assert first == second
    assert first.probability == pytest.approx(0.045)


def test_worst_case_stack_stays_under_ceiling():
    """Every penalty at once is 0.27, below the 0.4 ceiling; noise adds on top."""
    applicant = _applicant(
        credit_amount=400_000, annuity=5_000, age=20, employment_years=0,
        contract_type="Revolving loans", education="Lower secondary",
    )
    result = RiskScorer(noise=FixedNoise(0.01)).score(applicant)
    assert result.raw_score == pytest.approx(0.27)
    assert result.base_probability == pytest.approx(0.27)
    assert result.probability == pytest.approx(0.28)


def test_noise_applied_after_clamp_can_go_negative():
    applicant = _applicant(employment_years=15, education="Academic degree")
    result = RiskScorer(noise=FixedNoise(-0.01)).score(applicant)
    assert result.raw_score == pytest.approx(-0.04)
    assert result.base_probability == 0.0
    assert result.probability == pytest.approx(-0.01)


def test_clamp_after_noise_keeps_probability_in_unit_range():
    applicant = _applicant(employment_years=15, education="Academic degree")
    result = RiskScorer(noise=FixedNoise(-0.01), clamp_after_noise=True).score(applicant)
    assert result.probability == 0.0


def test_uniform_noise_stays_within_amplitude():
    noise = UniformNoise(0.01, seed=7)
    values = [noise() for _ in range(500)]
    assert all(-0.01 <= v <= 0.01 for v in values)
    assert min(values) < 0 < max(values)


def test_uniform_noise_seeded_is_reproducible():
    a = UniformNoise(0.01, seed=42)
    b = UniformNoise(0.01, rng=random.Random(42))
    assert [a() for _ in range(5)] == [b() for _ in range(5)]


def test_uniform_noise_rejects_negative_amplitude():
    with pytest.raises(ValueError):
        UniformNoise(-0.1)


def test_default_scorer_probability_bounds():
    scorer = RiskScorer()
    applicant = _applicant(age=20)
    for _ in range(100):
        p = scorer.score(applicant).probability
        assert 0.03 - 1e-9 <= p <= 0.05 + 1e-9
        assert not math.isnan(p)
