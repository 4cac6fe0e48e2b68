import base64
from urllib.parse import quote

import pytest

from qrcodeid.core.errors import InvalidIdentifierFormatError, QRGenerationError
from qrcodeid.schemas.qr import QRCodeOptions, QRColor, QRServiceOptions
from qrcodeid.services import qr
from qrcodeid.services.identifier import uuid_to_short_code
from qrcodeid.services.qr import build_scan_payload, generate_qr_code, generate_qr_code_url

UUID = "123e4567-e89b-12d3-a456-426614174000"
CODE = uuid_to_short_code(UUID)


def test_build_scan_payload():
    assert build_scan_payload(CODE) == CODE
    assert build_scan_payload(CODE, "https://example.com/scan") == f"https://example.com/scan/{CODE}"


def test_default_options():
    options = QRCodeOptions()
    assert options.size == 200
    assert options.margin == 2
    assert options.error_correction_level == "M"
    assert options.format == "png"
    assert options.color.dark == "#000000"
    assert options.color.light == "#FFFFFF"


def test_generate_png_data_url():
    data_url = generate_qr_code(UUID)
    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]).startswith(b"\x89PNG")


@pytest.mark.parametrize("level", ["L", "M", "Q", "H"])
def test_generate_png_every_error_correction_level(level):
    options = QRCodeOptions(error_correction_level=level, base_url="https://example.com/scan")
    assert generate_qr_code(UUID, options).startswith("data:image/png;base64,")


def test_generate_svg():
    options = QRCodeOptions(format="svg", color=QRColor(dark="#112233", light="#ffeedd"))
    svg = generate_qr_code(UUID, options)
    assert "<svg" in svg


def test_generate_rejects_invalid_uuid():
    with pytest.raises(InvalidIdentifierFormatError):
        generate_qr_code("nope")


def test_generate_wraps_renderer_failure(monkeypatch):
    def broken(data, options):
        raise RuntimeError("no encoder")

    monkeypatch.setattr(qr, "render_qr", broken)
    with pytest.raises(QRGenerationError) as exc_info:
        generate_qr_code(UUID)
    assert "no encoder" in str(exc_info.value)


def test_invalid_options_rejected():
    with pytest.raises(ValueError):
        QRCodeOptions(error_correction_level="X")
    with pytest.raises(ValueError):
        QRCodeOptions(format="gif")
    with pytest.raises(ValueError):
        QRCodeOptions(size=0)


def test_qr_code_url_default_service():
    url = generate_qr_code_url(UUID)
    assert url == f"https://api.qrserver.com/v1/create-qr-code/?size=200x200&data={CODE}"


def test_qr_code_url_encodes_base_url():
    options = QRServiceOptions(base_url="https://example.com/scan", size=300)
    url = generate_qr_code_url(UUID, options)
    assert "size=300x300" in url
    assert url.endswith("data=https%3A%2F%2Fexample.com%2Fscan%2F" + CODE)


def test_qr_code_url_matches_uri_component_encoding():
    payload = "https://ex.com/a b(1)!/" + CODE
    expected = quote(payload, safe="-_.!~*'()")
    url = generate_qr_code_url(UUID, QRServiceOptions(base_url="https://ex.com/a b(1)!"))
    assert url.endswith(expected)
    assert "(1)!" in url
    assert "%20" in url


@pytest.mark.parametrize("service, prefix", [
    ("google", "https://chart.googleapis.com/chart?chs=200x200&cht=qr&chl="),
    ("qr-code-generator", "https://qr-code-generator.com/api/qr-code/200x200/?data="),
    ("qr-server", "https://api.qrserver.com/v1/create-qr-code/?size=200x200&data="),
])
def test_qr_code_url_services(service, prefix):
    url = generate_qr_code_url(UUID, QRServiceOptions(service=service))
    assert url == prefix + CODE


def test_qr_code_url_rejects_invalid_uuid():
    with pytest.raises(InvalidIdentifierFormatError):
        generate_qr_code_url("nope")
