"""Mini README: Web interface for Budget Desk.

Exports the FastAPI application factory that serves the budget page and
the controller that sequences ledger updates on its behalf.
"""

from .controller import BudgetController, ItemUpdate
from .web_app import create_application

__all__ = ["BudgetController", "ItemUpdate", "create_application"]
