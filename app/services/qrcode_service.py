"""QR-Code Service für den Helfer-Check-in"""
import logging
import re
import qrcode
from io import BytesIO

logger = logging.getLogger(__name__)


class QRCodeService:
    """Erzeugt und liest die QR-Codes, mit denen Helfer eingecheckt werden"""

    PAYLOAD_PREFIX = "volunteer:"
    _PAYLOAD_PATTERN = re.compile(r'^\s*(?:volunteer:)?(?P<id>\d+)\s*$', re.IGNORECASE)

    @staticmethod
    def build_volunteer_payload(volunteer_id: int) -> str:
        """Inhalt des QR-Codes eines Helfers, z.B. "volunteer:12" """
        return f"{QRCodeService.PAYLOAD_PREFIX}{volunteer_id}"

    @staticmethod
    def parse_volunteer_payload(code: str) -> int:
        """
        Liest die Helfer-ID aus einem gescannten QR-Code.

        Akzeptiert "volunteer:<id>" sowie die nackte ID.

        Raises:
            ValueError: Wenn der Code keine Helfer-ID enthält
        """
        match = QRCodeService._PAYLOAD_PATTERN.match(code or "")
        if not match:
            raise ValueError(f"QR-Code '{code}' ist kein gültiger Helfer-Code")
        volunteer_id = int(match.group("id"))
        if volunteer_id <= 0:
            raise ValueError(f"QR-Code '{code}' ist kein gültiger Helfer-Code")
        return volunteer_id

    @staticmethod
    def generate_volunteer_qr_code(volunteer_id: int) -> bytes:
        """
        Generiert den Check-in QR-Code eines Helfers

        Returns:
            QR-Code als PNG-Bilddaten (bytes)
        """
        return QRCodeService.generate_simple_qr_code(
            QRCodeService.build_volunteer_payload(volunteer_id)
        )

    @staticmethod
    def generate_simple_qr_code(data: str) -> bytes:
        """
        Generiert einen einfachen QR-Code für beliebige Daten

        Returns:
            QR-Code als PNG-Bilddaten (bytes)
        """
        qr = qrcode.QRCode(
            version=None,  # Automatische Größenanpassung
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=10,
            border=4,
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buffer = BytesIO()
        img.save(buffer, format='PNG')
        buffer.seek(0)

        return buffer.getvalue()
