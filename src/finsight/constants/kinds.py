"""
Shared vocabularies for record types, classification tags and score bands.
These values match what the record store writes into its string columns.
"""

# Account types
BANK = "bank"
SAVINGS = "savings"
MOBILE_WALLET = "mobile_wallet"
CREDIT_CARD = "credit_card"
INVESTMENT = "investment"
LOAN = "loan"
REAL_ESTATE = "real_estate"
BUSINESS = "business"

ACCOUNT_TYPES = [
    BANK,
    SAVINGS,
    MOBILE_WALLET,
    CREDIT_CARD,
    INVESTMENT,
    LOAN,
    REAL_ESTATE,
    BUSINESS,
]

# Transaction types
INCOME = "income"
EXPENSE = "expense"
TRANSFER = "transfer"

TRANSACTION_TYPES = [INCOME, EXPENSE, TRANSFER]

UNCATEGORIZED = "Uncategorized"

# Holdings tagged with this classification are not tracked in any valuation bucket
UNCLASSIFIED = "none"

# Sub-score bands
BAND_GOOD = "good"
BAND_MODERATE = "moderate"
BAND_NEEDS_ATTENTION = "needs-attention"

# Overall health bands
GOOD_STANDING = "Good Standing"
FAIR = "Fair"
NEEDS_IMPROVEMENT = "Needs Improvement"
NO_DATA = "No Data"

# Alert severities understood by the notification collaborator
SEVERITY_WARNING = "warning"
SEVERITY_INFO = "info"
SEVERITY_SUCCESS = "success"
SEVERITY_ERROR = "error"


def get_all_account_types():
    """Get all account types."""
    return ACCOUNT_TYPES.copy()


def get_all_transaction_types():
    """Get all transaction types."""
    return TRANSACTION_TYPES.copy()
