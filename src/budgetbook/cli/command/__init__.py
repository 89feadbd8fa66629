from __future__ import annotations

# Command implementations for the budgetbook CLI.
# Each command module exposes `run(...)` (or add/update/delete for entity
# commands) that performs the action, prints to the console, and returns an
# exit code. Typer wrappers in budgetbook.cli.app delegate here.

__all__ = [
    "init",
    "dashboard",
    "budget",
    "categories",
    "report",
    "goals",
    "transactions",
    "transaction",
    "category",
    "goal",
    "profile",
    "settings",
    "export",
    "import_data",
]
