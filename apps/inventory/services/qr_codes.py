"""
QR code generation.

Plots carry a QR code of their id and approved visit requests carry a
QR pass. Both are stored as PNG data URLs so the dashboard can render
them in an ``<img>`` tag without a file host.
"""

import base64
import json
from io import BytesIO

import qrcode


class QRCodeGenerator:
    """
    Build QR code images and encode them as ``data:image/png;base64`` URLs.

    Example:
        Encode a plot id::

            qr_url = QRCodeGenerator.data_url(str(plot.id))
            # 'data:image/png;base64,iVBORw0KGgo...'

        Encode a structured payload::

            qr_url = QRCodeGenerator.data_url_for_payload({'id': '...', 'name': '...'})

    Note:
        Uses error correction level M (15% recovery), which keeps the
        image small while surviving a slightly damaged print-out.
    """

    DATA_URL_PREFIX = 'data:image/png;base64,'

    @staticmethod
    def generate_qr_image(data):
        """
        Generate a QR code image for a string.

        Args:
            data (str): Text to encode.

        Returns:
            PIL.Image.Image: The QR code image.
        """
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=4,
        )
        qr.add_data(data)
        qr.make(fit=True)

        return qr.make_image(fill_color="black", back_color="white")

    @classmethod
    def data_url(cls, data):
        """
        Encode ``data`` as a QR code PNG data URL.

        Args:
            data (str): Text to encode.

        Returns:
            str: ``data:image/png;base64,...`` URL of the PNG.
        """
        image = cls.generate_qr_image(data)
        buffer = BytesIO()
        image.save(buffer, format='PNG')
        encoded = base64.b64encode(buffer.getvalue()).decode('ascii')
        return f'{cls.DATA_URL_PREFIX}{encoded}'

    @classmethod
    def data_url_for_payload(cls, payload):
        """
        Encode a JSON-serialisable dict as a QR code PNG data URL.

        Args:
            payload (dict): Values to embed. Dates and UUIDs are converted
                with ``str``.

        Returns:
            str: ``data:image/png;base64,...`` URL of the PNG.
        """
        return cls.data_url(json.dumps(payload, default=str))
