import pytest

from booking_gateway.assembler import REQUIRED_KEYS, OutputContractError, assemble_record, ensure_output_contract


def _fields(**overrides):
    base = {k: None for k in REQUIRED_KEYS}
    base.update(bookingId="b1", customerEmail="a@example.com", type="event")
    for k in ("fechaBonita", "qrToken", "checkinUrl", "idempotencyKey"):
        base.pop(k)
    base.update(overrides)
    return base


def test_assemble_fills_timezone_default():
    rec = assemble_record(
        _fields(timezone=None),
        fecha_bonita=None,
        qr_token="t",
        checkin_url="u",
        idempotency_key="booking:b1",
        default_tz="Europe/Berlin",
    )
    assert rec["timezone"] == "Europe/Berlin"
    assert rec["fechaBonita"] is None
    assert set(rec) == set(REQUIRED_KEYS)


def test_assemble_rejects_missing_field():
    fields = _fields()
    del fields["currency"]
    with pytest.raises(OutputContractError, match="currency"):
        assemble_record(
            fields,
            fecha_bonita=None,
            qr_token="t",
            checkin_url="u",
            idempotency_key="k",
            default_tz="UTC",
        )


def test_contract_accepts_none_values():
    ensure_output_contract({k: None for k in REQUIRED_KEYS})


def test_contract_reports_missing_keys():
    with pytest.raises(OutputContractError, match="qrToken, checkinUrl"):
        ensure_output_contract({k: None for k in REQUIRED_KEYS if k not in ("qrToken", "checkinUrl")})
