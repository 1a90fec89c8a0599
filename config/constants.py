from enum import Enum


class CalculationStatus(str, Enum):
    OK = "ok"
    SUPPRESSED = "suppressed"  # 月薪 <= 0，不计算
    INVALID_INPUT = "invalid_input"

    @property
    def label(self) -> str:
        return {
            "ok": "Calculated",
            "suppressed": "Enter a monthly salary to see results",
            "invalid_input": "Invalid input",
        }[self.value]


# 列定义
BREAKDOWN_COLUMNS = [
    "month", "amount_paid", "interest_paid", "remaining_amount",
]

# 表头
BREAKDOWN_LABELS = {
    "month": "Month",
    "amount_paid": "Amount Paid",
    "interest_paid": "Interest Paid",
    "remaining_amount": "Remaining Amount",
}

MONEY_COLUMNS = ["amount_paid", "interest_paid", "remaining_amount"]
