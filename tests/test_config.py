import pydantic
import pytest

from booking_gateway.config import DEV_QR_SECRET, Settings


def test_defaults(monkeypatch):
    for name in ("BOOKING_QR_SECRET", "BOOKING_CHECKIN_BASE_URL", "BOOKING_DEFAULT_TZ",
                 "BOOKING_DATE_LOCALE", "BOOKING_WEBHOOK_SECRET", "BOOKING_WEBHOOK_SECRET_HEADER"):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.qr_secret == DEV_QR_SECRET
    assert s.uses_dev_secret
    assert s.checkin_base_url == "https://TU_DOMINIO/checkin?token="
    assert s.default_timezone == "Europe/Berlin"
    assert s.date_locale == "es_ES"
    assert s.webhook_secret is None
    assert s.webhook_secret_header == "x-webhook-secret"


def test_env_overrides_and_blank_values(monkeypatch):
    monkeypatch.setenv("BOOKING_QR_SECRET", "prod-secret")
    monkeypatch.setenv("BOOKING_DEFAULT_TZ", "   ")
    monkeypatch.setenv("BOOKING_WEBHOOK_SECRET_HEADER", "X-Hook-Token")
    s = Settings.from_env()
    assert s.qr_secret == "prod-secret"
    assert not s.uses_dev_secret
    assert s.default_timezone == "Europe/Berlin"
    assert s.webhook_secret_header == "x-hook-token"


def test_settings_are_frozen():
    s = Settings()
    with pytest.raises(pydantic.ValidationError):
        s.qr_secret = "changed"
