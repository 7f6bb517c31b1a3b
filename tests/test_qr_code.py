"""Tests für QR-Codes und den Check-in per Scan"""
import pytest

from app.services.qrcode_service import QRCodeService

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.mark.unit
class TestQRCodePayload:
    """Inhalt der Helfer-QR-Codes"""

    def test_build_payload(self):
        """Test: Payload enthält die Helfer-ID"""
        assert QRCodeService.build_volunteer_payload(12) == "volunteer:12"

    @pytest.mark.parametrize("code,volunteer_id", [
        ("volunteer:12", 12),
        ("VOLUNTEER:7", 7),
        (" 42 ", 42),
    ])
    def test_parse_payload(self, code, volunteer_id):
        """Test: Mit und ohne Präfix"""
        assert QRCodeService.parse_volunteer_payload(code) == volunteer_id

    @pytest.mark.parametrize("code", ["", "volunteer:", "participant:3", "volunteer:0", "abc"])
    def test_parse_invalid_payload(self, code):
        """Test: Unlesbare Codes"""
        with pytest.raises(ValueError):
            QRCodeService.parse_volunteer_payload(code)

    def test_generate_png(self):
        """Test: Ergebnis ist ein PNG"""
        assert QRCodeService.generate_volunteer_qr_code(1).startswith(PNG_SIGNATURE)


@pytest.mark.integration
class TestQRCodeApi:
    """QR-Code Endpunkte"""

    def test_qr_code_image(self, client, sample_volunteers):
        """Test: PNG für einen Helfer"""
        response = client.get(f"/api/volunteers/{sample_volunteers[0].id}/qr-code")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert response.content.startswith(PNG_SIGNATURE)

    def test_qr_code_unknown_volunteer(self, client):
        """Test: 404 für unbekannten Helfer"""
        assert client.get("/api/volunteers/999/qr-code").status_code == 404

    def test_check_in_by_scan(self, client, sample_event, sample_volunteers):
        """Test: Gescannter Code checkt den Helfer ein"""
        volunteer_id = sample_volunteers[0].id
        response = client.post("/api/check-in/qr", json={
            "code": f"volunteer:{volunteer_id}",
            "checkedInBy": "Gate Scanner",
        })
        assert response.status_code == 200
        assert response.json()["id"] == volunteer_id
        assert response.json()["checkedInBy"] == "Gate Scanner"
        assert client.get(f"/api/events/{sample_event.id}/stats").json()["checkedIn"] == 2

    def test_check_in_by_invalid_code(self, client):
        """Test: Unlesbarer Code liefert 400"""
        response = client.post("/api/check-in/qr", json={"code": "hello", "checkedInBy": "Admin"})
        assert response.status_code == 400
        assert "kein gültiger Helfer-Code" in response.json()["detail"]

    def test_check_in_by_unknown_volunteer(self, client):
        """Test: Code eines unbekannten Helfers liefert 404"""
        response = client.post("/api/check-in/qr", json={"code": "volunteer:999", "checkedInBy": "Admin"})
        assert response.status_code == 404
