# app/services/transaction.py

import logging

from app.core.exceptions import ValidationError
from app.repositories.transaction import TransactionRepository
from app.schemas.transaction import CheckoutRequest

logger = logging.getLogger("app.services")


class TransactionService:
    def __init__(self, repo: TransactionRepository):
        self.repo = repo

    def checkout(self, data: CheckoutRequest):
        product_ids = [item.product_id for item in data.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError("Duplicate products in checkout are not allowed")

        transaction = self.repo.checkout(data.items)
        logger.info(
            f"Transaction {transaction.id} recorded: "
            f"{len(transaction.details)} items, total {transaction.total_amount}"
        )
        return transaction
