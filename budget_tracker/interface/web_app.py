"""Mini README: FastAPI dashboard driving the budget ledger.

Structure:
    * create_application - application factory wiring routes and templates.

The dashboard renders incomes, expenses, totals and the remaining budget,
and forwards add, edit, save and delete actions to a single ``Ledger``. One
description/amount form serves both adding and editing: while an edit
session is active its drafts fill the form and a "Save Changes" action
appears. Endpoints are async and never await mid-operation, so ledger calls
run one at a time on the event loop in the order they arrive.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from ..configuration import get_settings
from ..finance import Ledger, TransactionNotFoundError, TransactionType
from ..logging_utils import get_logger
from ..utils.formatting import describe_transaction, format_currency

LOGGER = get_logger(__name__)


def create_application(ledger: Optional[Ledger] = None) -> FastAPI:
    """Create the FastAPI application around ``ledger`` (or a fresh one)."""

    settings = get_settings()
    if ledger is None:
        ledger = Ledger.with_demo_transactions() if settings.seed_demo_data else Ledger()
    symbol = settings.currency_symbol

    app = FastAPI(title="Budget Tracker", version="0.1.0")
    app.state.ledger = ledger
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request) -> HTMLResponse:
        """Render the ledger snapshot with the shared entry form."""

        session = ledger.edit_session
        LOGGER.debug(
            "Rendering dashboard: %s incomes, %s expenses, editing=%s",
            len(ledger.incomes),
            len(ledger.expenses),
            session.active_id if session else None,
        )
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "incomes": [
                    (transaction, describe_transaction(transaction, symbol))
                    for transaction in ledger.incomes
                ],
                "expenses": [
                    (transaction, describe_transaction(transaction, symbol))
                    for transaction in ledger.expenses
                ],
                "total_income": format_currency(ledger.total_of(TransactionType.INCOME), symbol),
                "total_expense": format_currency(ledger.total_of(TransactionType.EXPENSE), symbol),
                "remaining_budget": format_currency(ledger.remaining_budget(), symbol),
                "edit_session": session,
                "form_description": session.draft_description if session else "",
                "form_amount": session.draft_amount if session else "",
            },
        )

    @app.get("/snapshot")
    async def snapshot() -> JSONResponse:
        """Return the raw ledger snapshot for scripted clients."""

        return JSONResponse(ledger.export_snapshot())

    @app.post("/transactions")
    async def add_transaction(
        transaction_type: str = Form(...),
        description: str = Form(""),
        amount: str = Form(""),
    ) -> JSONResponse:
        """Record an income or expense from raw form text."""

        try:
            category = TransactionType.from_str(transaction_type)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        transaction_id = ledger.add_transaction(category, description, amount)
        if transaction_id is None:
            return JSONResponse({"accepted": False}, status_code=422)
        return JSONResponse(
            {
                "accepted": True,
                "transaction": ledger.get_transaction(transaction_id).as_dict(),
                "remaining_budget": str(ledger.remaining_budget()),
            },
            status_code=201,
        )

    @app.post("/transactions/{transaction_id}/edit")
    async def begin_edit(transaction_id: str) -> JSONResponse:
        """Open an edit session and return the seeded drafts."""

        try:
            draft = ledger.begin_edit(transaction_id)
        except TransactionNotFoundError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse({"transaction_id": transaction_id, **draft})

    @app.post("/transactions/{transaction_id}/delete")
    async def delete_transaction(transaction_id: str) -> JSONResponse:
        """Delete a transaction; repeated deletes are harmless."""

        ledger.delete_transaction(transaction_id)
        return JSONResponse(
            {
                "transaction_id": transaction_id,
                "editing": ledger.is_editing,
                "remaining_budget": str(ledger.remaining_budget()),
            }
        )

    @app.post("/edit/draft")
    async def update_draft(
        description: Optional[str] = Form(None),
        amount: Optional[str] = Form(None),
    ) -> JSONResponse:
        """Keep the active session's drafts in step with the form."""

        ledger.update_draft(description=description, amount=amount)
        session = ledger.edit_session
        return JSONResponse({"edit_session": session.as_dict() if session else None})

    @app.post("/edit/save")
    async def save_edit(
        description: str = Form(""),
        amount: str = Form(""),
    ) -> JSONResponse:
        """Apply the edited values to the transaction being edited."""

        session = ledger.edit_session
        if session is None:
            return JSONResponse({"saved": False, "detail": "No transaction is being edited."}, status_code=409)
        if not ledger.save_edit(description, amount):
            return JSONResponse({"saved": False, "transaction_id": session.active_id}, status_code=422)
        return JSONResponse(
            {
                "saved": True,
                "transaction": ledger.get_transaction(session.active_id).as_dict(),
                "remaining_budget": str(ledger.remaining_budget()),
            }
        )

    return app
