"""核心计算：最高可贷额度、等额本息月供、逐月还款明细"""
import logging
from typing import List, Optional

import numpy as np

from config.settings import SALARY_MULTIPLIER
from core.exceptions import InvalidInputError
from core.models import BreakdownRow, LoanCalculation, LoanInputs, LoanSummary
from core.validation import validate_loan_inputs

logger = logging.getLogger(__name__)


def calc_max_loan_amount(monthly_salary: float, multiplier: float = SALARY_MULTIPLIER) -> float:
    """最高可贷额度 = 月薪 × 倍数"""
    return monthly_salary * multiplier


def calc_monthly_rate(annual_rate: float) -> float:
    """年利率(%) -> 月利率：22 -> 0.018333..."""
    return annual_rate / 100 / 12


def calc_monthly_payment(principal: float, monthly_rate: float, tenor_months: int) -> float:
    """等额本息月供；零利率（或 1 + r 在浮点下等于 1）时退化为 本金 / 期数"""
    if monthly_rate == 0:
        return principal / tenor_months
    growth = (1 + monthly_rate) ** tenor_months
    if growth == 1:
        return principal / tenor_months
    return principal * monthly_rate * growth / (growth - 1)


def generate_breakdown(
    principal: float,
    monthly_rate: float,
    tenor_months: int,
    monthly_payment: float,
    variation: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> List[BreakdownRow]:
    """生成逐月还款明细

    利息始终按未截断的剩余本金计算；展示的剩余金额截断为 >= 0，截断值不参与后续计算。
    variation > 0 时每期月供乘以 1 + U(-variation, variation)，结果不可复现，需传入 rng。
    """
    if variation > 0 and rng is None:
        raise InvalidInputError("A random generator is required when payment variation is enabled")

    rows = []
    remaining = principal
    for month in range(1, tenor_months + 1):
        payment = monthly_payment
        if variation > 0:
            payment *= 1 + rng.uniform(-variation, variation)
        interest = remaining * monthly_rate
        amount_paid = payment - interest
        remaining -= amount_paid
        rows.append(BreakdownRow(
            month=month,
            amount_paid=amount_paid,
            interest_paid=interest,
            remaining_amount=max(0.0, remaining),
        ))

    if abs(remaining) > 0.005:
        # 浮动月供会导致末期未结清或多还
        logger.debug("Breakdown ends with unretired balance %.4f", remaining)
    return rows


def compute_loan(
    monthly_salary: float,
    annual_rate: float,
    tenor_months: int,
    variation: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> LoanCalculation:
    """计算可贷额度、月供和逐月明细。输入无效时抛出 InvalidInputError"""
    is_valid, message = validate_loan_inputs(annual_rate, tenor_months, variation)
    if not is_valid:
        raise InvalidInputError(message)

    tenor_months = int(tenor_months)
    max_loan_amount = calc_max_loan_amount(monthly_salary)
    r = calc_monthly_rate(annual_rate)
    try:
        monthly_payment = calc_monthly_payment(max_loan_amount, r, tenor_months)
    except OverflowError:
        raise InvalidInputError("Interest rate and tenor are too large to compute an installment") from None
    breakdown = generate_breakdown(
        max_loan_amount, r, tenor_months, monthly_payment, variation=variation, rng=rng,
    )

    logger.debug(
        "Computed loan",
        extra={
            "monthly_salary": monthly_salary,
            "annual_rate": annual_rate,
            "tenor_months": tenor_months,
            "max_loan_amount": max_loan_amount,
            "monthly_payment": monthly_payment,
            "randomized": variation > 0,
        },
    )
    return LoanCalculation(
        inputs=LoanInputs(monthly_salary, annual_rate, tenor_months),
        summary=LoanSummary(max_loan_amount=max_loan_amount, monthly_payment=monthly_payment),
        breakdown=breakdown,
    )
