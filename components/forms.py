"""表单组件"""
from typing import Tuple

import streamlit as st

from config.settings import (
    CURRENCY, DEFAULT_INTEREST_RATE, DEFAULT_TENOR_MONTHS, PAYMENT_VARIATION,
    RATE_MAX, RATE_MIN, RATE_STEP, TENOR_MAX, TENOR_MIN, TENOR_STEP,
)
from core.models import LoanInputs
from core.validation import coerce_salary


def render_loan_form(key_prefix: str = "loan") -> Tuple[LoanInputs, bool]:
    """渲染输入表单，返回 (当前输入, 是否启用月供浮动)

    不使用 st.form：任一控件变化即触发重跑，等同于输入变化后立即重算。
    """
    salary_text = st.text_input(
        f"Net Monthly Salary ({CURRENCY})",
        placeholder="Enter your monthly salary",
        key=f"{key_prefix}_salary",
    )
    monthly_salary = coerce_salary(salary_text)

    # 标签保持不变，否则控件会被重建、值被重置；当前值由 format 显示
    annual_rate = st.slider(
        "Interest Rate",
        min_value=RATE_MIN,
        max_value=RATE_MAX,
        value=DEFAULT_INTEREST_RATE,
        step=RATE_STEP,
        format="%.1f%%",
        key=f"{key_prefix}_rate",
    )

    tenor_months = st.slider(
        "Loan Tenor",
        min_value=TENOR_MIN,
        max_value=TENOR_MAX,
        value=DEFAULT_TENOR_MONTHS,
        step=TENOR_STEP,
        format="%d months",
        key=f"{key_prefix}_tenor",
    )

    vary = st.checkbox(
        f"Vary installments (±{PAYMENT_VARIATION:.0%}, not reproducible)",
        value=False,
        key=f"{key_prefix}_vary",
    )

    return LoanInputs(monthly_salary, float(annual_rate), int(tenor_months)), vary
