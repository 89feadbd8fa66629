"""Typer + Rich command line interface for budgetbook."""
