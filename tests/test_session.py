"""计算会话测试"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest
from core.session import LoanCalculatorSession, try_compute_loan
from core.models import LoanInputs
from config.constants import CalculationStatus


class TestTryComputeLoan:
    def test_ok(self):
        outcome = try_compute_loan(LoanInputs(1000, 22, 12))
        assert outcome.ok
        assert outcome.calculation.summary.max_loan_amount == 4000
        assert outcome.error == ""

    @pytest.mark.parametrize("salary", [0, -500, float("nan")])
    def test_suppressed(self, salary):
        outcome = try_compute_loan(LoanInputs(salary, 22, 12))
        assert outcome.status == CalculationStatus.SUPPRESSED
        assert outcome.calculation is None

    def test_invalid_tenor(self):
        outcome = try_compute_loan(LoanInputs(1000, 22, 0))
        assert outcome.status == CalculationStatus.INVALID_INPUT
        assert outcome.calculation is None
        assert "tenor" in outcome.error.lower()


class TestSession:
    def test_initial_state_suppressed(self):
        session = LoanCalculatorSession()
        assert session.inputs == LoanInputs(0.0, 22.0, 12)
        assert session.outcome.status == CalculationStatus.SUPPRESSED
        assert session.calculation is None

    def test_recompute_on_salary_change(self):
        session = LoanCalculatorSession()
        assert session.set_salary(1000) is True
        assert session.calculation.summary.max_loan_amount == 4000

    def test_results_replaced_on_change(self):
        session = LoanCalculatorSession(monthly_salary=1000)
        first = session.calculation
        session.set_tenor(24)
        assert session.calculation is not first
        assert len(session.calculation.breakdown) == 24
        session.set_interest_rate(0)
        assert session.calculation.summary.monthly_payment == pytest.approx(4000 / 24)

    def test_results_cleared_when_salary_drops(self):
        session = LoanCalculatorSession(monthly_salary=1000)
        assert session.outcome.ok
        session.set_salary(0)
        assert session.outcome.status == CalculationStatus.SUPPRESSED
        assert session.calculation is None

    def test_observers_notified_once_per_change(self):
        session = LoanCalculatorSession()
        seen = []
        session.subscribe(seen.append)
        session.set_salary(1000)
        session.set_salary(1000)  # 未变化
        session.update(annual_rate=10, tenor_months=6)
        assert len(seen) == 2
        assert seen[-1].calculation.inputs == LoanInputs(1000, 10, 6)

    def test_unsubscribe(self):
        session = LoanCalculatorSession()
        seen = []
        session.subscribe(seen.append)
        session.unsubscribe(seen.append)
        session.set_salary(1000)
        assert seen == []

    def test_overflowing_tenor_reported(self):
        outcome = try_compute_loan(LoanInputs(1000, 50, 100000))
        assert outcome.status == CalculationStatus.INVALID_INPUT
        assert outcome.calculation is None
        assert outcome.error

    def test_tiny_rate_is_ok(self):
        outcome = try_compute_loan(LoanInputs(1000, 1e-15, 12))
        assert outcome.ok

    def test_same_rng_does_not_resample(self):
        rng = np.random.default_rng(5)
        session = LoanCalculatorSession(monthly_salary=1000, variation=0.05, rng=rng)
        varied = session.calculation
        seen = []
        session.subscribe(seen.append)
        assert session.set_variation(0.05, rng) is False
        assert session.update(variation=0.05) is False
        assert seen == []
        assert session.calculation is varied

    def test_inputs_and_variation_change_notify_once(self):
        session = LoanCalculatorSession(rng=np.random.default_rng(9))
        seen = []
        session.subscribe(seen.append)
        session.update(monthly_salary=1000, annual_rate=10, tenor_months=6, variation=0.05)
        assert len(seen) == 1
        assert seen[0].ok
        assert seen[0].calculation.summary.monthly_payment == pytest.approx(
            try_compute_loan(LoanInputs(1000, 10, 6)).calculation.summary.monthly_payment
        )

    def test_invalid_tenor_reported(self):
        session = LoanCalculatorSession(monthly_salary=1000)
        session.set_tenor(0)
        assert session.outcome.status == CalculationStatus.INVALID_INPUT
        assert session.calculation is None

    def test_unknown_input_rejected(self):
        session = LoanCalculatorSession()
        with pytest.raises(TypeError):
            session.update(currency="USD")

    def test_variation_toggle(self):
        session = LoanCalculatorSession(monthly_salary=1000)
        plain = session.calculation
        session.set_variation(0.05, np.random.default_rng(11))
        assert session.calculation.breakdown != plain.breakdown
        assert session.calculation.summary == plain.summary
        session.set_variation(0.0)
        assert session.calculation == plain
