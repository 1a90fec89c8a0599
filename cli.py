import click
import numpy as np

from config.settings import DEFAULT_INTEREST_RATE, DEFAULT_TENOR_MONTHS, LOG_LEVEL
from config.constants import CalculationStatus
from core.models import LoanInputs
from core.session import try_compute_loan
from components.tables import build_breakdown_display
from components.metrics import summary_sentences
from utils.log import setup_logging


def _compute_or_fail(salary, rate, tenor, variation=0.0, seed=None):
    rng = np.random.default_rng(seed) if variation > 0 else None
    outcome = try_compute_loan(LoanInputs(salary, rate, tenor), variation=variation, rng=rng)
    if outcome.status == CalculationStatus.INVALID_INPUT:
        raise click.ClickException(outcome.error)
    return outcome


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=LOG_LEVEL, show_default=True, help='Log level')
def cli(log_level):
    """A CLI for the loan calculator."""
    setup_logging(log_level)


@cli.command()
@click.option('--salary', type=float, required=True, help='Net monthly salary')
@click.option('--rate', type=float, default=DEFAULT_INTEREST_RATE, show_default=True, help='Annual interest rate (%)')
@click.option('--tenor', type=int, default=DEFAULT_TENOR_MONTHS, show_default=True, help='Loan tenor in months')
def summary(salary, rate, tenor):
    """Prints the borrow limit and the monthly installment."""
    outcome = _compute_or_fail(salary, rate, tenor)
    if not outcome.ok:
        click.echo(outcome.status.label)
        return
    for sentence in summary_sentences(outcome.calculation):
        click.echo(sentence)


@cli.command()
@click.option('--salary', type=float, required=True, help='Net monthly salary')
@click.option('--rate', type=float, default=DEFAULT_INTEREST_RATE, show_default=True, help='Annual interest rate (%)')
@click.option('--tenor', type=int, default=DEFAULT_TENOR_MONTHS, show_default=True, help='Loan tenor in months')
@click.option('--variation', type=click.FloatRange(0, 1, max_open=True), default=0.0, show_default=True,
              help='Random per-month payment variation, e.g. 0.05 for ±5% (not reproducible without --seed)')
@click.option('--seed', type=int, default=None, help='Seed for the payment variation')
@click.option('--format', 'output_format', type=click.Choice(['table', 'csv']), default='table', show_default=True,
              help='Output format')
def breakdown(salary, rate, tenor, variation, seed, output_format):
    """Prints the month-by-month payment breakdown."""
    outcome = _compute_or_fail(salary, rate, tenor, variation, seed)
    if not outcome.ok:
        click.echo(outcome.status.label)
        return
    frame = outcome.calculation.breakdown_frame()
    if output_format == 'csv':
        click.echo(frame.round(2).to_csv(index=False), nl=False)
    else:
        click.echo(build_breakdown_display(frame).to_string(index=False))


if __name__ == "__main__":
    cli()
