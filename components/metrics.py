"""结果面板组件"""
import streamlit as st

from core.models import LoanCalculation
from utils.formatters import fmt_currency, fmt_months, fmt_rate


def summary_sentences(calculation: LoanCalculation) -> tuple:
    """结果面板的两句说明"""
    inputs = calculation.inputs
    summary = calculation.summary
    borrow = (
        f"You can borrow up to {fmt_currency(summary.max_loan_amount)} with your stated net income of "
        f"{fmt_currency(inputs.monthly_salary)} a month, at an interest rate of {fmt_rate(inputs.annual_rate)}."
    )
    installment = (
        f"With these estimations, you would make payment installments of about "
        f"{fmt_currency(summary.monthly_payment)} monthly over {inputs.tenor_months} months."
    )
    return borrow, installment


def render_results(calculation: LoanCalculation):
    """渲染估算结果"""
    st.subheader("YOUR ESTIMATED RESULTS")
    for sentence in summary_sentences(calculation):
        st.markdown(sentence)

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Borrow Limit", fmt_currency(calculation.summary.max_loan_amount))
    with c2:
        st.metric("Monthly Installment", fmt_currency(calculation.summary.monthly_payment))
    with c3:
        st.metric("Total Interest", fmt_currency(calculation.total_interest_paid))
    st.caption(f"Tenor: {fmt_months(calculation.inputs.tenor_months)}")
