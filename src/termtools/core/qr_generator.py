from __future__ import annotations

import io

from typing import Final

import qrcode

from qrcode.constants import ERROR_CORRECT_M
from qrcode.exceptions import DataOverflowError

DEFAULT_BORDER: Final[int] = 2


def build_qr(text: str, border: int = DEFAULT_BORDER) -> qrcode.QRCode:
    """
    Encode ``text`` into the smallest QR version that fits.

    Args:
        text: Content to encode.
        border: Quiet-zone width in modules.

    Returns:
        A QRCode whose matrix has been computed.

    Raises:
        ValueError: If the text is empty or too long for any QR version.
    """
    if not text:
        msg = 'Nothing to encode: input is empty.'
        raise ValueError(msg)

    qr = qrcode.QRCode(error_correction=ERROR_CORRECT_M, border=border)
    qr.add_data(text)
    try:
        qr.make(fit=True)
    except DataOverflowError as exc:
        msg = f'Input of {len(text)} characters is too long for a QR code.'
        raise ValueError(msg) from exc
    return qr


def qr_matrix(text: str, border: int = DEFAULT_BORDER) -> list[list[bool]]:
    """Return the module matrix, quiet zone included; True is a dark module."""
    return build_qr(text, border).get_matrix()


def render_qr(text: str, invert: bool = False, border: int = DEFAULT_BORDER) -> str:
    """Render ``text`` as a QR code drawn with half-block characters."""
    out = io.StringIO()
    build_qr(text, border).print_ascii(out=out, invert=invert)
    return out.getvalue()
