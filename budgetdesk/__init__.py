"""Mini README: Core package initializer for Budget Desk.

Budget Desk is a single-page income and expense tracker. The bookkeeping
lives in ``budgetdesk.budget``; ``budgetdesk.interface`` serves the page.
This module only re-exports the logging helper so importing the package
stays free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
