import io
import time
from urllib.parse import quote

import qrcode
from sqlalchemy.orm import Session

from app.models.order import Order


def generate_folio(db: Session, prefix: str) -> str:
    """Generate a unique '<PREFIX>-<epoch ms>' receipt folio."""
    stamp = int(time.time() * 1000)
    while True:
        folio = f"{prefix}-{stamp}"
        if not db.query(Order.id).filter(Order.folio == folio).first():
            return folio
        stamp += 1


def receipt_url(base_url: str, folio: str) -> str:
    """Public URL encoded in the ticket QR code."""
    return f"{base_url.rstrip('/')}/boletos.php?folio={quote(folio, safe='')}"


def qr_png(data: str, box_size: int = 6, border: int = 2) -> bytes:
    """Render ``data`` as a PNG QR code. Requires qrcode + Pillow."""
    qr = qrcode.QRCode(
        version=None,  # auto
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
