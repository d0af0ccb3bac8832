"""EMI calculation and amortization schedule for fixed-rate loans"""

from decimal import Decimal, Overflow
from typing import List

from pyrme_loans.domain.exceptions import InvalidInput
from pyrme_loans.domain.models import AmortizationEntry, AmortizationResult, LoanRequest
from pyrme_loans.utils.money import HUNDRED, Number, round_half_up, to_amount, to_decimal, to_whole_units

MONTHS_PER_YEAR = Decimal("12")


def build_loan_request(principal: Number, annual_rate_percent: Number, term_months: int) -> LoanRequest:
    """Validate raw inputs and wrap them in a LoanRequest"""
    principal_dec = to_amount(principal, "principal")
    rate_dec = to_decimal(annual_rate_percent, "annual_rate_percent")

    if isinstance(term_months, bool) or not isinstance(term_months, int):
        raise InvalidInput("term_months must be an integer")
    if principal_dec <= 0:
        raise InvalidInput("principal must be greater than 0")
    if rate_dec < 0:
        raise InvalidInput("annual_rate_percent cannot be negative")
    if term_months <= 0:
        raise InvalidInput("term_months must be at least 1")

    return LoanRequest(principal=principal_dec, annual_rate_percent=rate_dec, term_months=term_months)


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """10.5 (% per year) -> 0.00875 per month"""
    return annual_rate_percent / MONTHS_PER_YEAR / HUNDRED


def _unrounded_installment(request: LoanRequest) -> Decimal:
    r = monthly_rate(request.annual_rate_percent)
    n = request.term_months

    if r == 0:
        return request.principal / n

    # Decimal ** int is computed by repeated squaring at context precision,
    # so (1 + r) ** 480 stays well-conditioned.
    try:
        growth = (1 + r) ** n
    except Overflow:
        raise InvalidInput("annual_rate_percent is too large for this term")
    return request.principal * r * growth / (growth - 1)


def calculate_emi(principal: Number, annual_rate_percent: Number, term_months: int) -> int:
    """Monthly installment rounded half-up to whole currency units"""
    request = build_loan_request(principal, annual_rate_percent, term_months)
    return to_whole_units(_unrounded_installment(request))


def calculate_amortization(principal: Number, annual_rate_percent: Number, term_months: int) -> AmortizationResult:
    """
    Compute the fixed monthly installment and lifetime totals.

    Rounding policy:
    - The installment is rounded half-up to a whole currency unit at the end
      of the formula, and that rounded figure is what the borrower pays.
    - total_payment is derived from the rounded installment so it always
      equals monthly_installment * term_months exactly.
    - A zero-rate loan carries no interest; any difference between
      total_payment and principal is rounding residue, so total_interest is 0.

    Example:
        500000 @ 10.5% for 36 months
        r = 0.00875, EMI = 16251.2... -> 16251
        total_payment = 16251 * 36 = 585036, total_interest = 85036

    Raises:
        InvalidInput: principal <= 0 or above MAX_AMOUNT, term_months <= 0 or
            annual_rate_percent < 0
    """
    request = build_loan_request(principal, annual_rate_percent, term_months)

    installment = to_whole_units(_unrounded_installment(request))
    total_payment = installment * request.term_months

    if request.annual_rate_percent == 0:
        total_interest = 0
    else:
        # Whole-unit rounding on a near-zero rate can land a unit under principal
        total_interest = max(to_whole_units(Decimal(total_payment) - request.principal), 0)

    if total_payment > 0:
        interest_share = round_half_up(Decimal(total_interest) * HUNDRED / Decimal(total_payment), 2)
    else:
        interest_share = Decimal("0")
    principal_share = HUNDRED - interest_share

    return AmortizationResult(
        monthly_installment=installment,
        total_payment=total_payment,
        total_interest=total_interest,
        principal_share=float(principal_share),
        interest_share=float(interest_share),
    )


def generate_amortization_schedule(
    principal: Number,
    annual_rate_percent: Number,
    term_months: int,
) -> List[AmortizationEntry]:
    """
    Split every installment into interest and principal repayment.

    Each month charges interest on the opening balance (rounded half-up) and
    the rest of the installment repays principal. The last month absorbs the
    accumulated rounding remainder so the closing balance is exactly zero.

    Example:
        120000 @ 0% for 12 months -> 12 rows of 10000 principal, 0 interest
    """
    request = build_loan_request(principal, annual_rate_percent, term_months)
    r = monthly_rate(request.annual_rate_percent)
    installment = to_whole_units(_unrounded_installment(request))

    balance = request.principal
    schedule = []
    for month in range(1, request.term_months + 1):
        interest = to_whole_units(balance * r)

        if month == request.term_months:
            principal_part = to_whole_units(balance)
            payment = principal_part + interest
        else:
            principal_part = min(installment - interest, to_whole_units(balance))
            payment = principal_part + interest

        balance -= principal_part
        if balance < 0 or month == request.term_months:
            balance = Decimal("0")

        schedule.append(
            AmortizationEntry(
                month=month,
                installment=payment,
                interest_component=interest,
                principal_component=principal_part,
                closing_balance=to_whole_units(balance),
            )
        )

    return schedule
