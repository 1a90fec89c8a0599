"""格式化表格组件"""
import pandas as pd
import streamlit as st

from config.constants import BREAKDOWN_LABELS, MONEY_COLUMNS
from utils.formatters import fmt_currency


def build_breakdown_display(breakdown: pd.DataFrame) -> pd.DataFrame:
    """逐月明细转展示表：金额列格式化，列名换成表头"""
    display_df = breakdown.copy()

    for col in MONEY_COLUMNS:
        if col in display_df.columns:
            display_df[col] = display_df[col].apply(fmt_currency)

    display_cols = [c for c in BREAKDOWN_LABELS if c in display_df.columns]
    return display_df[display_cols].rename(columns=BREAKDOWN_LABELS)


def render_breakdown_table(breakdown: pd.DataFrame):
    """渲染还款明细表"""
    if breakdown.empty:
        st.info("No breakdown to show yet.")
        return

    st.dataframe(build_breakdown_display(breakdown), width="stretch", hide_index=True)
