"""budgetbook - local-only household budgeting ledger."""

__version__ = "0.1.0"
