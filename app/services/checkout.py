import logging
from decimal import Decimal

from app.core.config import Settings
from app.core.errors import FolioConflictError, InvalidInputError
from app.schemas.checkout import CheckoutRequest, CheckoutResponse
from app.services.order_ledger import OrderLedger
from app.utils.money import sum_money, tax_breakdown, to_money
from app.utils.receipt import generate_folio, receipt_url

logger = logging.getLogger(__name__)

FOLIO_ATTEMPTS = 5


class CheckoutCoordinator:
    """
    Turns a cart into a paid order.

    Cart prices are tax inclusive: the order total is the sum of the item
    subtotals and the tax is split out of it backwards,
    ``subtotal = total / (1 + rate)``.
    """

    def __init__(
        self,
        ledger: OrderLedger,
        tax_rate: Decimal,
        folio_prefix: str,
        public_base_url: str,
    ):
        self.ledger = ledger
        self.tax_rate = tax_rate
        self.folio_prefix = folio_prefix
        self.public_base_url = public_base_url

    @classmethod
    def from_settings(cls, ledger: OrderLedger, settings: Settings) -> "CheckoutCoordinator":
        return cls(
            ledger,
            tax_rate=settings.TAX_RATE,
            folio_prefix=settings.FOLIO_PREFIX,
            public_base_url=settings.PUBLIC_BASE_URL,
        )

    def checkout(self, cart: CheckoutRequest) -> CheckoutResponse:
        if not cart.items:
            raise InvalidInputError("Your cart is empty")

        breakdown = tax_breakdown(sum_money(i.subtotal for i in cart.items), self.tax_rate)
        if cart.total is not None and to_money(cart.total) != breakdown.total:
            raise InvalidInputError(
                f"Cart total {cart.total} does not match the items ({breakdown.total})"
            )

        attempt = 0
        while True:
            folio = generate_folio(self.ledger.db, self.folio_prefix)
            try:
                order = self.ledger.create_order(
                    cart.customer_name,
                    cart.customer_email,
                    cart.items,
                    folio=folio,
                    subtotal=breakdown.subtotal,
                    tax=breakdown.tax,
                )
            except FolioConflictError:
                # a concurrent checkout took the same millisecond stamp
                attempt += 1
                if attempt >= FOLIO_ATTEMPTS:
                    raise
                logger.warning("Folio %s already taken, retrying", folio)
                continue
            break
        logger.info("Checkout %s -> order %s, total %s", folio, order.id, breakdown.total)

        return CheckoutResponse(
            order_id=order.id,
            folio=folio,
            subtotal=breakdown.subtotal,
            tax=breakdown.tax,
            total=breakdown.total,
            qr_url=receipt_url(self.public_base_url, folio),
        )
