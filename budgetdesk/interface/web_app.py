"""Mini README: FastAPI-powered single-page budget tracker.

Structure:
    * create_application - application factory wiring routes and templates.
    * seed_demo_entries - optional sample data for demonstrations.

The page is rendered server side from the ledger's current state; the
bundled script then talks to the JSON endpoints to add and delete rows
without reloading. Every endpoint runs the controller pipeline to
completion before responding, so each request sees a consistent ledger.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..budget import EntryKind, InvalidEntryError, Ledger
from ..configuration import BudgetDeskSettings, get_settings
from ..logging_utils import configure_root_logger, get_logger
from .controller import BudgetController

LOGGER = get_logger(__name__)

DEMO_ENTRIES = (
    (EntryKind.INCOME, "Salary", 2400.0),
    (EntryKind.INCOME, "Freelance work", 350.0),
    (EntryKind.EXPENSE, "Rent", 900.0),
    (EntryKind.EXPENSE, "Groceries", 215.5),
)


def seed_demo_entries(controller: BudgetController) -> None:
    """Populate the ledger with deterministic sample entries."""

    for kind, description, amount in DEMO_ENTRIES:
        controller.add_item(kind, description, amount)
    LOGGER.debug("Seeded %s demo entries", len(DEMO_ENTRIES))


def create_application(
    settings: Optional[BudgetDeskSettings] = None,
    ledger: Optional[Ledger] = None,
) -> FastAPI:
    """Create the FastAPI application around a single ledger instance."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    ledger = ledger if ledger is not None else Ledger(id_policy=settings.id_policy)
    controller = BudgetController(ledger)
    if settings.seed_demo_entries:
        seed_demo_entries(controller)

    app = FastAPI(title=settings.app_title, version="1.0.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")
    app.state.controller = controller

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the budget page from the current ledger state."""

        context = controller.page_context(date.today())
        LOGGER.debug(
            "Rendering dashboard with %s income and %s expense rows",
            len(context["income_rows"]),
            len(context["expense_rows"]),
        )
        context["app_title"] = settings.app_title
        return templates.TemplateResponse(request, "dashboard.html", context)

    @app.get("/budget")
    async def budget() -> JSONResponse:
        """Return the aggregate snapshot and expense percentages."""

        return JSONResponse(
            {
                "budget": controller.budget_view(),
                "percentages": controller.percentages_view(),
            }
        )

    @app.post("/items")
    async def add_item(
        entry_type: str = Form(..., alias="type"),
        description: str = Form(""),
        value: str = Form(""),
    ) -> JSONResponse:
        """Record an income or expense submitted from the page form."""

        try:
            update = controller.add_item(entry_type, description, value)
        except InvalidEntryError as error:
            LOGGER.info("Rejected entry input: %s", error)
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(update.as_dict())

    @app.delete("/items/{row_id}")
    async def delete_item(row_id: str) -> JSONResponse:
        """Delete the row keyed ``<kind>-<id>``; unknown ids change nothing."""

        try:
            update = controller.delete_item(row_id)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return JSONResponse(update.as_dict())

    return app
