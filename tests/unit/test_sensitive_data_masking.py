import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    @pytest.mark.parametrize("key", ["senha", "codigo_acesso", "token", "Authorization"])
    def test_sensitive_keys_masked(self, key):
        result = mask_sensitive_data(None, None, {"event": "test", key: "s3cret"})
        assert result[key] == "***MASKED***"

    def test_secret_inside_string(self):
        result = mask_sensitive_data(None, None, {"event": "test", "data": "senha='s3cret123'"})
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_access_code_inside_string(self):
        result = mask_sensitive_data(None, None, {"event": "test", "body": "codigo_acesso: 123456"})
        assert "123456" not in result["body"]

    def test_bearer_header_inside_string(self):
        result = mask_sensitive_data(None, None, {"event": "test", "header": "token=abc123xyz"})
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "order.created", "order_id": "0190-abc", "quantity": 2}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "order.created", "order_id": "0190-abc", "quantity": 2}
