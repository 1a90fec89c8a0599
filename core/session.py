"""
计算会话

持有三项输入（月薪、年利率、期限），任一输入变化后整体重算并通知订阅者。
月薪 <= 0 时不计算，清空上一次结果。
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from config.constants import CalculationStatus
from config.settings import DEFAULT_INTEREST_RATE, DEFAULT_TENOR_MONTHS
from core.calculator import compute_loan
from core.exceptions import InvalidInputError
from core.models import LoanCalculation, LoanInputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationOutcome:
    status: CalculationStatus
    calculation: Optional[LoanCalculation] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status == CalculationStatus.OK


def try_compute_loan(
    inputs: LoanInputs,
    variation: float = 0.0,
    rng: Optional[np.random.Generator] = None,
) -> CalculationOutcome:
    """按重算策略计算，输入问题以 CalculationOutcome 返回而不是抛异常"""
    if not inputs.monthly_salary > 0:
        return CalculationOutcome(CalculationStatus.SUPPRESSED)
    try:
        calculation = compute_loan(
            inputs.monthly_salary, inputs.annual_rate, inputs.tenor_months,
            variation=variation, rng=rng,
        )
    except InvalidInputError as e:
        logger.info("Rejected loan inputs: %s", e, extra={"tenor_months": inputs.tenor_months})
        return CalculationOutcome(CalculationStatus.INVALID_INPUT, error=str(e))
    return CalculationOutcome(CalculationStatus.OK, calculation=calculation)


Observer = Callable[[CalculationOutcome], None]


class LoanCalculatorSession:
    def __init__(
        self,
        monthly_salary: float = 0.0,
        annual_rate: float = DEFAULT_INTEREST_RATE,
        tenor_months: int = DEFAULT_TENOR_MONTHS,
        variation: float = 0.0,
        rng: Optional[np.random.Generator] = None,
    ):
        self._inputs = LoanInputs(monthly_salary, annual_rate, tenor_months)
        self._variation = variation
        self._rng = rng
        self._observers: List[Observer] = []
        self._outcome = try_compute_loan(self._inputs, variation, rng)

    @property
    def inputs(self) -> LoanInputs:
        return self._inputs

    @property
    def outcome(self) -> CalculationOutcome:
        return self._outcome

    @property
    def calculation(self) -> Optional[LoanCalculation]:
        return self._outcome.calculation

    def subscribe(self, callback: Observer) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: Observer) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def set_salary(self, monthly_salary: float) -> bool:
        return self.update(monthly_salary=monthly_salary)

    def set_interest_rate(self, annual_rate: float) -> bool:
        return self.update(annual_rate=annual_rate)

    def set_tenor(self, tenor_months: int) -> bool:
        return self.update(tenor_months=tenor_months)

    def set_variation(self, variation: float, rng: Optional[np.random.Generator] = None) -> bool:
        """切换月供浮动；浮动结果不可复现，默认关闭。传入同一个 rng 不会重算"""
        if rng is not None and rng is not self._rng:
            self._rng = rng
            self._variation = variation
            self.recompute()
            return True
        return self.update(variation=variation)

    def update(self, **changes) -> bool:
        """修改输入（可同时修改 variation），有实际变化时只重算一次并返回 True"""
        unknown = set(changes) - {"monthly_salary", "annual_rate", "tenor_months", "variation"}
        if unknown:
            raise TypeError(f"Unknown loan inputs: {', '.join(sorted(unknown))}")

        current = {
            "monthly_salary": self._inputs.monthly_salary,
            "annual_rate": self._inputs.annual_rate,
            "tenor_months": self._inputs.tenor_months,
            "variation": self._variation,
        }
        merged = {**current, **changes}
        if merged == current:
            return False

        self._variation = merged.pop("variation")
        self._inputs = LoanInputs(**merged)
        self.recompute()
        return True

    def recompute(self) -> CalculationOutcome:
        """整体重算（不做增量更新），并通知所有订阅者"""
        self._outcome = try_compute_loan(self._inputs, self._variation, self._rng)
        if self._outcome.status == CalculationStatus.SUPPRESSED:
            logger.debug("Salary not positive, results cleared")
        for callback in list(self._observers):
            callback(self._outcome)
        return self._outcome
