from config.settings import AMOUNT_PRECISION, CURRENCY


def fmt_currency(value: float, currency: str = CURRENCY) -> str:
    """格式化金额：1234.5 -> GHS 1,234.50；负数 -> -GHS 1,234.50"""
    amount = round(abs(value), AMOUNT_PRECISION)
    sign = "-" if value < 0 and amount > 0 else ""
    return f"{sign}{currency} {amount:,.{AMOUNT_PRECISION}f}"


def fmt_rate(value: float) -> str:
    """格式化利率：22 -> 22%，22.5 -> 22.5%"""
    return f"{value:g}%"


def fmt_months(months: int) -> str:
    """格式化期数：1 -> 1 month，12 -> 12 months"""
    return f"{months} month" if months == 1 else f"{months} months"
