"""
Loan service — loan origination and the EMI function.
"""

from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.orm import Session

from banking_api.errors import LedgerError
from banking_api.models.customer import Customer
from banking_api.models.loan import Loan

CENT = Decimal("0.01")


def calculate_emi(
    principal: Decimal, annual_rate: Decimal, months: int
) -> Decimal:
    """
    Equated monthly installment for an amortizing loan.

        EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)

    where r is the monthly rate (annual percent / 12 / 100)
    and n the number of months. A zero rate reduces to P / n.
    Rounded half-up to cents.
    """
    principal = Decimal(principal)
    if months <= 0:
        raise ValueError("months must be positive")

    monthly_rate = Decimal(annual_rate) / Decimal(12) / Decimal(100)
    if monthly_rate == 0:
        emi = principal / months
    else:
        growth = (1 + monthly_rate) ** months
        emi = principal * monthly_rate * growth / (growth - 1)

    return emi.quantize(CENT, rounding=ROUND_HALF_UP)


class LoanService:

    def __init__(self, db: Session):
        self.db = db

    def create_loan(
        self,
        customer_id: str,
        loan_amount: Decimal,
        time_period: int,
        interest_rate: Decimal,
        loan_type: str,
    ) -> Loan:
        """
        Issue a loan to an existing customer.

        The full principal is outstanding until repayments
        are posted.
        """
        customer = self.db.get(Customer, customer_id)
        if not customer:
            raise LedgerError(f"Customer {customer_id} not found")

        if loan_amount <= 0 or time_period <= 0 or interest_rate < 0:
            raise LedgerError(
                "Loan amount and time period must be positive "
                "and the interest rate non-negative"
            )

        loan = Loan(
            customer_id=customer.customer_id,
            loan_amount=loan_amount,
            time_period=time_period,
            interest_rate=interest_rate,
            loan_type=loan_type,
            remaining_amount=loan_amount,
        )
        self.db.add(loan)
        self.db.flush()
        return loan
