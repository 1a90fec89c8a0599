import os

# 页面配置
PAGE_TITLE = "Loan Calculator"
PAGE_ICON = "💰"
LAYOUT = "centered"

# 货币
CURRENCY = "GHS"

# 最高可贷额度 = 月薪 × 倍数
SALARY_MULTIPLIER = 4

# 利率滑块 (%)
DEFAULT_INTEREST_RATE = 22.0
RATE_MIN = 0.0
RATE_MAX = 50.0
RATE_STEP = 0.5

# 期限滑块 (月)
DEFAULT_TENOR_MONTHS = 12
TENOR_MIN = 3
TENOR_MAX = 36
TENOR_STEP = 1

# 月供随机浮动幅度 (±5%)，仅在界面勾选时启用
PAYMENT_VARIATION = 0.05

# 日志
LOG_LEVEL = os.environ.get("LOAN_CALC_LOG_LEVEL", "INFO")
SERVICE_NAME = "loan-calculator"

# 图表配色
COLORS = {
    "amount_paid": "#1f77b4",
    "interest_paid": "#2ca02c",
    "remaining_amount": "#d62728",
}

# 金额精度
AMOUNT_PRECISION = 2
