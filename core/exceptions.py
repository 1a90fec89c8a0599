"""计算层异常"""


class InvalidInputError(ValueError):
    """Loan inputs make the annuity formula undefined"""

    pass
