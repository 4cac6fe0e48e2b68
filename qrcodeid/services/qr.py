import base64
import io
import logging
from typing import Optional
from urllib.parse import quote

import qrcode
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q
from qrcode.image.pil import PilImage
from qrcode.image.svg import SvgPathImage

from qrcodeid.core.errors import QRGenerationError
from qrcodeid.schemas.qr import QRCodeOptions, QRServiceOptions
from qrcodeid.services.identifier import ensure_uuid, uuid_to_short_code
from qrcodeid.utils.payload import join_payload

logger = logging.getLogger(__name__)

ERROR_CORRECTION = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}

QR_SERVICE_URLS = {
    "qr-server": "https://api.qrserver.com/v1/create-qr-code/?size={size}x{size}&data={data}",
    "google": "https://chart.googleapis.com/chart?chs={size}x{size}&cht=qr&chl={data}",
    "qr-code-generator": "https://qr-code-generator.com/api/qr-code/{size}x{size}/?data={data}",
}

# Same reserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_scan_payload(short_code: str, base_url: Optional[str] = None) -> str:
    return join_payload(short_code, base_url)


def _svg_factory(options: QRCodeOptions):
    style = dict(getattr(SvgPathImage, "QR_PATH_STYLE", {}), fill=options.color.dark)
    return type("ColoredSvgPathImage", (SvgPathImage,), {
        "QR_PATH_STYLE": style,
        "background": options.color.light,
    })


def render_qr(data: str, options: QRCodeOptions) -> str:
    """Render ``data`` to a PNG data URL or an SVG document."""
    qr = qrcode.QRCode(
        error_correction=ERROR_CORRECTION[options.error_correction_level],
        border=options.margin,
    )
    qr.add_data(data)
    qr.make(fit=True)
    # Fit the whole symbol, quiet zone included, into options.size pixels
    qr.box_size = max(1, options.size // (qr.modules_count + 2 * options.margin))

    buf = io.BytesIO()
    if options.format == "svg":
        img = qr.make_image(image_factory=_svg_factory(options))
        img.save(buf)
        return buf.getvalue().decode("utf-8")

    img = qr.make_image(
        image_factory=PilImage,
        fill_color=options.color.dark,
        back_color=options.color.light,
    )
    img.save(buf, format="PNG")
    b64 = base64.b64encode(buf.getvalue()).decode("ascii")
    return f"data:image/png;base64,{b64}"


def generate_qr_code(uuid: str, options: Optional[QRCodeOptions] = None) -> str:
    options = options or QRCodeOptions()
    ensure_uuid(uuid)

    payload = build_scan_payload(uuid_to_short_code(uuid), options.base_url)
    try:
        return render_qr(payload, options)
    except Exception as e:
        logger.error("QR rendering failed for %s: %s", uuid, e)
        raise QRGenerationError(f"QR Code generation failed: {e}") from e


def generate_qr_code_url(uuid: str, options: Optional[QRServiceOptions] = None) -> str:
    """Build an image URL on a hosted QR service; nothing is fetched."""
    options = options or QRServiceOptions()
    ensure_uuid(uuid)

    payload = build_scan_payload(uuid_to_short_code(uuid), options.base_url)
    template = QR_SERVICE_URLS.get(options.service, QR_SERVICE_URLS["qr-server"])
    return template.format(size=options.size, data=quote(payload, safe=_URI_COMPONENT_SAFE))
