# app/repositories/transaction.py

from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import KasirError, NotFoundError, ValidationError
from app.models.products import Product
from app.models.transactions import Transaction
from app.models.transaction_details import TransactionDetail
from app.repositories.base import BaseRepository


class TransactionRepository(BaseRepository):

    def checkout(self, items) -> Transaction:
        """
        Record a sale for `items` (objects with product_id and quantity).

        Product rows are locked while stock is checked and decremented.
        Either every line is written or nothing is.
        """
        try:
            transaction = Transaction(total_amount=0)
            self.db.add(transaction)

            total_amount = 0

            for item in items:
                if item.quantity <= 0:
                    raise ValidationError("Item quantity must be greater than zero")

                product = (
                    self.db.query(Product)
                    .filter(Product.id == item.product_id, Product.active())
                    .with_for_update()
                    .first()
                )

                if product is None:
                    raise NotFoundError(f"Product {item.product_id} not found")

                if product.stock < item.quantity:
                    raise ValidationError(f"Insufficient stock for {product.name}")

                subtotal = product.price * item.quantity
                total_amount += subtotal

                product.stock -= item.quantity

                transaction.details.append(
                    TransactionDetail(
                        product_id=product.id,
                        product_name=product.name,
                        quantity=item.quantity,
                        subtotal=subtotal,
                    )
                )

            transaction.total_amount = total_amount
            self.db.commit()
            self.db.refresh(transaction)

        except KasirError:
            self.db.rollback()
            raise

        except SQLAlchemyError as exc:
            raise self._store_error("save transaction", exc) from exc

        return transaction
