"""
Chart of accounts API endpoints.

The API layer is thin. It handles HTTP concerns (status codes,
response formatting) and delegates all lookups to the
AccountsChart.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from cratchit.api.dependencies import get_chart
from cratchit.services.accounts_chart import AccountsChart, MalformedDocument
from cratchit.schemas.chart import (
    AccountResponse,
    AccountIdsResponse,
    AccountIdUsageResponse,
    ChartSummaryResponse,
)

router = APIRouter(prefix="/chart", tags=["Chart"])


@router.get("/accounts", response_model=list[AccountResponse])
def list_accounts(chart: AccountsChart = Depends(get_chart)):
    """List every account, sub-accounts before their parents."""
    return list(chart.accounts)


@router.get("/accounts/top-level", response_model=list[AccountResponse])
def list_top_level_accounts(chart: AccountsChart = Depends(get_chart)):
    return chart.get_top_level_accounts()


@router.get("/accounts/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    chart: AccountsChart = Depends(get_chart),
):
    """
    Get a single account.

    When an id occurs more than once in the chart, the first
    account in post-order is returned.
    """
    account = chart.get_account_by_id(account_id)
    if account is None:
        raise HTTPException(
            status_code=404, detail=f"Account '{account_id}' not found"
        )
    return account


@router.get(
    "/accounts/{account_id}/subaccounts",
    response_model=list[AccountResponse],
)
def get_subaccounts(
    account_id: str,
    chart: AccountsChart = Depends(get_chart),
):
    """Get the direct sub-accounts of an account."""
    if chart.get_account_by_id(account_id) is None:
        raise HTTPException(
            status_code=404, detail=f"Account '{account_id}' not found"
        )
    return chart.get_subaccounts(account_id)


@router.get("/account-ids", response_model=AccountIdsResponse)
def list_account_ids(chart: AccountsChart = Depends(get_chart)):
    return AccountIdsResponse(
        account_ids=chart.get_account_ids(),
        duplicates=chart.get_duplicate_ids(),
    )


@router.get("/account-ids/{account_id}", response_model=AccountIdUsageResponse)
def check_account_id(
    account_id: str,
    chart: AccountsChart = Depends(get_chart),
):
    """Report whether an id is already used anywhere in the chart."""
    return AccountIdUsageResponse(
        account_id=account_id,
        used=chart.is_account_id_used(account_id),
    )


@router.post("/validate", response_model=ChartSummaryResponse)
def validate_chart(document: Any = Body(...)):
    """
    Parse a posted chart document without storing it.

    Returns a summary of the chart it describes, or 400 with
    the validation errors.
    """
    try:
        chart = AccountsChart(document)
    except MalformedDocument as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ChartSummaryResponse(
        num_accounts=chart.get_num_accounts(),
        account_ids=chart.get_account_ids(),
        duplicates=chart.get_duplicate_ids(),
    )
