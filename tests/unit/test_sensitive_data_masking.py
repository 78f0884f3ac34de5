import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_phone_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "call 081234567890 please"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "081234567890" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_international_phone_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "phone": "+6281234567890"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "81234567890" not in result["phone"]

    def test_password_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    @pytest.mark.parametrize("key", ["password", "access", "refresh"])
    def test_sensitive_keys_masked(self, key):
        from config.settings import mask_sensitive_data

        result = mask_sensitive_data(None, None, {"event": "test", key: "eyJhbGciOi"})
        assert result[key] == "***MASKED***"

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "order.checkout_completed", "order_number": "TXN1700000000000ABCDEF12AB"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["order_number"] == "TXN1700000000000ABCDEF12AB"
        assert result["event"] == "order.checkout_completed"

    def test_order_number_with_phone_like_digits_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "order.invalid_transition", "order_number": "TXN1760812345678123ABC9F2E"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["order_number"] == "TXN1760812345678123ABC9F2E"

    def test_uuid_with_phone_like_digits_unchanged(self):
        from config.settings import mask_sensitive_data

        order_id = "0192d3a4-5b6c-7d8e-9f01-628123456789"
        result = mask_sensitive_data(None, None, {"event": "test", "data": f"order {order_id} locked"})
        assert result["data"] == f"order {order_id} locked"
