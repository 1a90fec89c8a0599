import math
from typing import Tuple


def validate_loan_inputs(
    annual_rate: float,
    tenor_months: int,
    variation: float = 0.0,
) -> Tuple[bool, str]:
    """校验计算输入，返回 (是否合法, 错误信息)

    利率、期限的取值范围由界面滑块限制，这里只拦截会让年金公式无意义的输入。
    """
    if isinstance(tenor_months, bool) or tenor_months is None:
        return False, "Loan tenor must be a whole number of months"

    try:
        if int(tenor_months) != tenor_months:
            return False, "Loan tenor must be a whole number of months"
    except (ValueError, TypeError, OverflowError):
        return False, "Loan tenor must be a whole number of months"

    if tenor_months <= 0:
        return False, "Loan tenor must be greater than 0 months"

    if annual_rate is None or math.isnan(annual_rate):
        return False, "Interest rate must be a number"

    if annual_rate / 100 / 12 <= -1:
        return False, "Interest rate is too low: monthly rate must be above -100%"

    if variation < 0 or variation >= 1:
        return False, "Payment variation must be in [0, 1)"

    return True, ""


def coerce_salary(value) -> float:
    """自由输入的月薪转数字：空值、无法解析、非有限数一律视为 0"""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        salary = float(value)
    except (ValueError, TypeError):
        return 0.0
    if not math.isfinite(salary):
        return 0.0
    return salary
