"""Application ports package."""

from .expense_source import ExpenseSourcePort

__all__ = ["ExpenseSourcePort"]
