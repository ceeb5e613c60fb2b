from pydantic import BaseModel, field_validator

GENDERS = ["M", "F"]
CONTRACT_TYPES = ["Cash loans", "Revolving loans"]
EDUCATION_LEVELS = [
    "Secondary / secondary special",
    "Higher education",
    "Incomplete higher",
    "Lower secondary",
    "Academic degree",
]


class ApplicantData(BaseModel):
    """Applicant record submitted by the form.

    Categorical fields are free strings; membership in the level lists above
    is not enforced.
    """
    annual_income: float
    credit_amount: float
    annuity: float
    age: float
    employment_years: float
    gender: str
    contract_type: str
    education: str

    @field_validator(
        "annual_income", "credit_amount", "annuity", "age", "employment_years", mode="before"
    )
    @classmethod
    def reject_booleans(cls, value):
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value
