import pytest

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_google_api_key_masked(self):
        from config.settings import mask_sensitive_data

        key = "AIza" + "A" * 35
        event_dict = {"event": "test", "url": f"https://firestore.googleapis.com/?key={key}"}
        result = mask_sensitive_data(None, None, event_dict)
        assert key not in result["url"]
        assert "***MASKED***" in result["url"]

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

    def test_non_string_values_untouched(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "fields": ["price"], "count": 3}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["fields"] == ["price"]
        assert result["count"] == 3

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "product.created", "product_id": "Xk3b9QpL2mN8rT4vW1yZ"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["product_id"] == "Xk3b9QpL2mN8rT4vW1yZ"
        assert result["event"] == "product.created"
