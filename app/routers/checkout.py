# =========================================================
# CHECKOUT ROUTER
#
# Records a sale: stock is decremented and one transaction
# with its line items is stored, all or nothing.
# =========================================================

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.core.config import settings
from app.core.exceptions import NotFoundError, StoreError, ValidationError
from app.core.rate_limiter import limiter
from app.core.response import success
from app.dependencies import get_transaction_service
from app.schemas.transaction import CheckoutRequest, TransactionResponse
from app.services.transaction import TransactionService

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("", status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.CHECKOUT_RATE_LIMIT)
def checkout(
    request: Request,
    checkout_data: CheckoutRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    try:
        transaction = service.checkout(checkout_data)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to complete checkout: {exc}",
        )

    return success(
        "Checkout completed successfully",
        TransactionResponse.model_validate(transaction),
        status_code=status.HTTP_201_CREATED,
    )
