from typing import Literal, Tuple
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def new_item_id() -> str:
    return f"item-{uuid4().hex}"


class _Record(BaseModel):
    # Immutable; stored with camelCase keys, snake_case accepted on load too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BudgetItem(_Record):
    id: str = Field(default_factory=new_item_id)
    name: str
    category: str
    budget: float = Field(default=0.0, ge=0)
    actual: float = Field(default=0.0, ge=0)


class SalaryDetails(_Record):
    basic_salary: float = 0.0
    shift_allowance: float = 0.0
    housing_allowance: float = 0.0
    ot_hours_str: str = "0"
    tax_rate_str: str = "10"
    other_deductions: float = 0.0
    bonus_multiplier_str: str = "0"


class InvestmentDetails(_Record):
    education_fund: float = 0.0
    retirement_fund: float = 0.0
    general_savings: float = 0.0
    education_target: float = 0.0
    retirement_target: float = 0.0
    savings_target: float = 0.0


class MonthlyBudget(_Record):
    income: float = 0.0
    items: Tuple[BudgetItem, ...] = ()
    categories: Tuple[str, ...] = ()
    year: str
    salary_slip: SalaryDetails = Field(default_factory=SalaryDetails)
    investments: InvestmentDetails = Field(default_factory=InvestmentDetails)

    @field_validator("salary_slip", "investments", mode="before")
    @classmethod
    def _default_when_null(cls, value, info):
        if value is None:
            return SalaryDetails() if info.field_name == "salary_slip" else InvestmentDetails()
        return value

    @field_validator("categories")
    @classmethod
    def _unique_categories(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(value))


class Alert(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    ratio: float
    severity: Literal["warning", "critical"]
