"""FastAPI web application for payinstruct."""

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Response, status
from pydantic import BaseModel, Field

from payinstruct import __version__
from payinstruct.engine.processor import process_payment_instruction
from payinstruct.logging_config import setup_logging
from payinstruct.models.account import Account
from payinstruct.models.result import PaymentResult, PaymentStatus

setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="payinstruct API",
    description="Parses and validates DEBIT/CREDIT payment instructions",
    version=__version__,
)


# Request models
class PaymentInstructionRequest(BaseModel):
    """Request body for instruction processing."""
    accounts: List[Account] = Field(..., description="Accounts the instruction may reference")
    instruction: str = Field(..., description="Instruction text, e.g. 'DEBIT 50 USD FROM ACCOUNT A FOR CREDIT TO ACCOUNT B'")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/payment-instructions", response_model=PaymentResult)
async def process_instruction(request: PaymentInstructionRequest, response: Response):
    """Process a payment instruction.

    Failed instructions are returned with 400; successful and pending ones with 200.
    The body has the same shape either way.
    """
    try:
        result = process_payment_instruction(request.accounts, request.instruction)
    except Exception as e:
        logger.exception("Unexpected error while processing payment instruction")
        raise HTTPException(status_code=500, detail=f"Failed to process instruction: {str(e)}")

    if result.status == PaymentStatus.FAILED:
        response.status_code = status.HTTP_400_BAD_REQUEST
    return result


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
