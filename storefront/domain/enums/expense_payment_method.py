"""経費支払方法の列挙型."""
from enum import Enum


class ExpensePaymentMethod(str, Enum):
    """経費の支払方法."""

    COMPANY_CARD = "company_card"
    REIMBURSEMENT = "reimbursement"
    DIRECT_PAYMENT = "direct_payment"
    BANK_TRANSFER = "bank_transfer"
