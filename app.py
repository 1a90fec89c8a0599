"""贷款计算器 - 主入口"""
import numpy as np
import streamlit as st

from config.settings import LAYOUT, LOG_LEVEL, PAGE_ICON, PAGE_TITLE, PAYMENT_VARIATION
from core.session import LoanCalculatorSession
from components.charts import create_breakdown_chart
from components.forms import render_loan_form
from components.metrics import render_results
from components.tables import render_breakdown_table
from utils.log import setup_logging

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
)


@st.cache_resource
def _init_logging():
    setup_logging(LOG_LEVEL)


_init_logging()


@st.dialog("Payment Breakdown", width="large")
def show_breakdown(calculation):
    breakdown = calculation.breakdown_frame()
    render_breakdown_table(breakdown)
    st.plotly_chart(create_breakdown_chart(breakdown), width="stretch")


st.title(f"{PAGE_ICON} {PAGE_TITLE}")

# 会话内保存输入、结果和随机源；随机源只创建一次，未改输入的重跑不会重新抽样
if "loan_session" not in st.session_state:
    st.session_state.loan_session = LoanCalculatorSession(rng=np.random.default_rng())
session: LoanCalculatorSession = st.session_state.loan_session

inputs, vary = render_loan_form()

session.update(
    monthly_salary=inputs.monthly_salary,
    annual_rate=inputs.annual_rate,
    tenor_months=inputs.tenor_months,
    variation=PAYMENT_VARIATION if vary else 0.0,
)

outcome = session.outcome
if outcome.ok:
    st.divider()
    render_results(outcome.calculation)
    if st.button("View Breakdown", type="secondary"):
        show_breakdown(outcome.calculation)
elif outcome.error:
    st.error(outcome.error)
