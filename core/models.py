from dataclasses import dataclass, field, asdict
from typing import List

import pandas as pd

from config.constants import BREAKDOWN_COLUMNS


@dataclass(frozen=True)
class LoanInputs:
    monthly_salary: float
    annual_rate: float  # 年利率 (%)，如 22.0
    tenor_months: int


@dataclass(frozen=True)
class LoanSummary:
    max_loan_amount: float
    monthly_payment: float


@dataclass(frozen=True)
class BreakdownRow:
    month: int
    amount_paid: float
    interest_paid: float
    remaining_amount: float  # 展示值，已截断为 >= 0


@dataclass
class LoanCalculation:
    inputs: LoanInputs
    summary: LoanSummary
    breakdown: List[BreakdownRow] = field(default_factory=list)

    @property
    def total_amount_paid(self) -> float:
        return sum(row.amount_paid for row in self.breakdown)

    @property
    def total_interest_paid(self) -> float:
        return sum(row.interest_paid for row in self.breakdown)

    def breakdown_frame(self) -> pd.DataFrame:
        """逐月明细转 DataFrame，列顺序见 BREAKDOWN_COLUMNS"""
        return pd.DataFrame(
            [asdict(row) for row in self.breakdown],
            columns=BREAKDOWN_COLUMNS,
        )
