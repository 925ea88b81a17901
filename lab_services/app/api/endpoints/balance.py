"""
Balance endpoint for the banking service.

The balance is a mock value; no account storage exists behind it.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

router = APIRouter()

BALANCE_MESSAGE = "Your current balance is $5000."


@router.get("/balance", response_class=PlainTextResponse)
async def check_balance() -> str:
    """Return the mock account balance as plain text."""
    logger.debug("Balance requested")
    return BALANCE_MESSAGE
