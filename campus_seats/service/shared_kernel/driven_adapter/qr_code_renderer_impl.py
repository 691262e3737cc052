import io

import qrcode
from qrcode.exceptions import DataOverflowError

from campus_seats.platform.exception.exceptions import CodeRenderError
from campus_seats.platform.logging.loguru_io import Logger
from campus_seats.service.shared_kernel.app.interface.i_code_renderer import ICodeRenderer


class QrCodeRendererImpl(ICodeRenderer):
    """QR code PNG renderer (qrcode + Pillow), high error correction (~30% damage tolerant)."""

    media_type = 'image/png'

    def __init__(self, *, box_size: int = 10, border: int = 4) -> None:
        self.box_size = box_size
        self.border = border

    @Logger.io(truncate_content=True)
    def render(self, payload: str) -> bytes:
        if not payload:
            raise CodeRenderError('Cannot render an empty payload')

        qr = qrcode.QRCode(
            version=None,  # auto
            error_correction=qrcode.constants.ERROR_CORRECT_H,
            box_size=self.box_size,
            border=self.border,
        )
        try:
            qr.add_data(payload)
            qr.make(fit=True)
        except DataOverflowError as e:
            raise CodeRenderError(f'Payload too large for a QR code: {e}') from e

        img = qr.make_image(fill_color='black', back_color='white')
        buf = io.BytesIO()
        img.save(buf, format='PNG')
        return buf.getvalue()
