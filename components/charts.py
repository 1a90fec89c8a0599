"""Plotly 图表工厂"""
import pandas as pd
import plotly.graph_objects as go
import plotly.io as pio

from config.constants import BREAKDOWN_LABELS
from config.settings import COLORS, CURRENCY

# 在 plotly_white 基础上去掉背景色，适配 Streamlit 卡片
_axis = dict(gridcolor="#eeeeee", zeroline=False, tickfont=dict(size=11))
pio.templates["loan_calculator"] = go.layout.Template(pio.templates["plotly_white"]).update(
    layout=dict(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=_axis,
        yaxis=_axis,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
    ),
)


def create_breakdown_chart(breakdown: pd.DataFrame, template: str = "loan_calculator") -> go.Figure:
    """逐月还款构成：本金/利息堆叠柱 + 剩余金额折线（右轴）"""
    fig = go.Figure()
    months = breakdown["month"]

    for col in ["amount_paid", "interest_paid"]:
        fig.add_trace(go.Bar(
            x=months,
            y=breakdown[col],
            name=BREAKDOWN_LABELS[col],
            marker_color=COLORS[col],
            hovertemplate=f"Month %{{x}}<br>{BREAKDOWN_LABELS[col]}: {CURRENCY} %{{y:,.2f}}<extra></extra>",
        ))

    fig.add_trace(go.Scatter(
        x=months,
        y=breakdown["remaining_amount"],
        mode="lines+markers",
        name=BREAKDOWN_LABELS["remaining_amount"],
        yaxis="y2",
        line=dict(color=COLORS["remaining_amount"], width=2),
        hovertemplate=f"Month %{{x}}<br>Remaining: {CURRENCY} %{{y:,.2f}}<extra></extra>",
    ))

    fig.update_layout(
        title="Payment Breakdown",
        barmode="stack",
        xaxis_title="Month",
        yaxis_title=f"Installment ({CURRENCY})",
        yaxis2=dict(
            title=f"Remaining ({CURRENCY})",
            overlaying="y",
            side="right",
            showgrid=False,
            rangemode="tozero",
        ),
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=60),
        height=400,
        xaxis=dict(tickmode="linear", dtick=1 if len(breakdown) <= 12 else 3),
        template=template,
    )
    return fig
