"""QR code generation for project voting links."""

from io import BytesIO

import qrcode
import qrcode.image.svg
from qrcode.exceptions import DataOverflowError

from src.expovote.core.exceptions import QRCodeError
from src.expovote.core.logging import get_logger

logger = get_logger(__name__)


def build_voting_url(base_url: str, project_id: int) -> str:
    """Absolute URL of the voting page a QR code points to."""
    return f"{base_url.rstrip('/')}/votar/{project_id}"


def make_qr(payload: str) -> qrcode.QRCode:
    """Build a fitted QR code for a payload."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
        image_factory=qrcode.image.svg.SvgPathImage,
    )
    qr.add_data(payload)
    try:
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        logger.error("QR encoding failed", payload_length=len(payload), error=str(e))
        raise QRCodeError(str(e)) from e
    return qr


def render_svg(qr: qrcode.QRCode) -> bytes:
    """Render a QR code as a standalone SVG document."""
    image = qr.make_image()
    buffer = BytesIO()
    image.save(buffer)
    return buffer.getvalue()


def voting_qr_svg(base_url: str, project_id: int) -> bytes:
    return render_svg(make_qr(build_voting_url(base_url, project_id)))
