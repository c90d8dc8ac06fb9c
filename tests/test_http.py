"""
Tests for the HTTP layer: headers, decoding and error translation.
"""

from unittest.mock import patch

import pytest
import requests

from tingting_cli.api import TingTingClient
from tingting_cli.api._http import HTTPClient
from tingting_cli.config import ClientConfig
from tingting_cli.exceptions import ApiError, TingTingError

from .conftest import BASE_URL, make_response, sent_request


class TestAuthorizationHeader:
    """Tests for bearer token resolution."""
    
    def test_static_token_from_config(self, client, send):
        """Test configured API token is sent."""
        client.user_detail()
        
        assert sent_request(send).headers["Authorization"] == "Bearer static-token"
    
    def test_instance_token_overrides_config(self, client, send):
        """Test explicitly set token takes precedence."""
        client.set_token("session-jwt")
        client.user_detail()
        
        assert sent_request(send).headers["Authorization"] == "Bearer session-jwt"
    
    def test_most_recent_token_wins(self, client, send):
        """Test the last set token is used."""
        client.set_token("first")
        client.set_api_token("second")
        client.user_detail()
        
        assert sent_request(send).headers["Authorization"] == "Bearer second"
        assert client.token == "second"
    
    def test_no_token_sends_no_header(self):
        """Test requests are unauthenticated without any token."""
        with TingTingClient(ClientConfig(base_url=BASE_URL)) as client:
            with patch.object(client._http.session, "send") as mock_send:
                mock_send.return_value = make_response(200, {})
                client.active_broker_phones()
                
                assert "Authorization" not in sent_request(mock_send).headers
                assert client.token is None
    
    def test_empty_instance_token_suppresses_config_token(self, client, send):
        """Test an explicitly set empty token wins and sends no header."""
        client.set_token("")
        client.user_detail()
        
        assert "Authorization" not in sent_request(send).headers
        assert client.token == ""
    
    def test_set_token_returns_client(self, client):
        """Test token setters support chaining."""
        assert client.set_token("abc") is client
        assert client.set_api_token("def") is client


class TestRequestShape:
    """Tests for URL and header construction."""
    
    def test_default_headers(self, client, send):
        """Test JSON headers are always sent."""
        client.get_api_keys()
        
        headers = sent_request(send).headers
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"
    
    def test_path_is_relative_to_base_url(self, client, send):
        """Test endpoint is joined onto the base URL path."""
        client.active_user_phones()
        
        assert sent_request(send).url == f"{BASE_URL}phone-number/active/"
    
    def test_base_url_without_trailing_slash(self):
        """Test base URL is normalised before joining."""
        config = ClientConfig(base_url="https://api.tingting.test/api/v1")
        http = HTTPClient(config)
        
        assert http.base_url == "https://api.tingting.test/api/v1/"
        
        with patch.object(http.session, "send") as mock_send:
            mock_send.return_value = make_response(200, {})
            http.request("GET", "campaign/")
            
            assert sent_request(mock_send).url == "https://api.tingting.test/api/v1/campaign/"
    
    def test_query_filters_are_encoded(self, client, send):
        """Test filters mapping becomes the query string."""
        client.list_campaigns({"limit": 5, "offset": 0, "status": "Not Started"})
        
        request = sent_request(send)
        assert request.method == "GET"
        assert request.url == f"{BASE_URL}campaign/?limit=5&offset=0&status=Not+Started"
    
    def test_timeout_and_ssl_passed_to_transport(self):
        """Test config timeout and verify flag reach the session."""
        config = ClientConfig(base_url=BASE_URL, timeout=12.5, verify_ssl=False)
        with TingTingClient(config) as client:
            with patch.object(client._http.session, "send") as mock_send:
                mock_send.return_value = make_response(200, {})
                client.get_api_keys()
                
                kwargs = mock_send.call_args[1]
                assert kwargs["timeout"] == 12.5
                assert kwargs["verify"] is False


class TestSuccessDecoding:
    """Tests for lenient decoding of successful responses."""
    
    def test_json_object(self, client, send):
        """Test JSON object body is returned."""
        send.return_value = make_response(200, {"token": "abc"})
        
        assert client.get_api_keys() == {"token": "abc"}
    
    def test_json_list(self, client, send):
        """Test JSON array body is returned as a list."""
        send.return_value = make_response(200, [{"id": 1}, {"id": 2}])
        
        assert client.active_user_phones() == [{"id": 1}, {"id": 2}]
    
    def test_empty_body(self, client, send):
        """Test empty body decodes to an empty mapping."""
        send.return_value = make_response(204, b"")
        
        assert client.delete_campaign(3) == {}
    
    def test_non_json_body(self, client, send):
        """Test non-JSON body decodes to an empty mapping."""
        send.return_value = make_response(200, "<html>ok</html>")
        
        assert client.run_campaign(3) == {}
    
    def test_json_null(self, client, send):
        """Test JSON null decodes to an empty mapping."""
        send.return_value = make_response(200, "null")
        
        assert client.user_detail() == {}


class TestErrorTranslation:
    """Tests for ApiError construction."""
    
    def test_error_with_message_field(self, client, send):
        """Test remote message, status code and body are carried."""
        send.return_value = make_response(401, {"message": "invalid token"})
        
        with pytest.raises(ApiError) as exc_info:
            client.user_detail()
        
        error = exc_info.value
        assert error.message == "invalid token"
        assert str(error) == "invalid token"
        assert error.code == 401
        assert error.raw_data == {"message": "invalid token"}
    
    def test_error_without_message_field(self, client, send):
        """Test transport text is used when body has no message."""
        body = {"detail": "Not found."}
        send.return_value = make_response(404, body)
        
        with pytest.raises(ApiError) as exc_info:
            client.delete_contact(9)
        
        error = exc_info.value
        assert error.code == 404
        assert error.raw_data == body
        assert "404 Client Error" in error.message
    
    def test_error_with_unparseable_body(self, client, send):
        """Test unparseable error body gives raw_data None and transport text."""
        send.return_value = make_response(500, "<html>Internal error</html>")
        
        with pytest.raises(ApiError) as exc_info:
            client.list_campaigns()
        
        error = exc_info.value
        assert error.code == 500
        assert error.raw_data is None
        assert isinstance(error.__cause__, requests.exceptions.HTTPError)
        assert error.message == str(error.__cause__)
    
    def test_error_with_list_body(self, client, send):
        """Test non-object error body is kept but its message is not used."""
        send.return_value = make_response(400, ["number is required"])
        
        with pytest.raises(ApiError) as exc_info:
            client.add_contact(1, {})
        
        assert exc_info.value.raw_data == ["number is required"]
        assert "400 Client Error" in exc_info.value.message
    
    def test_connection_error(self, client, send):
        """Test connection failure becomes ApiError without response data."""
        send.side_effect = requests.exceptions.ConnectionError("Connection refused")
        
        with pytest.raises(ApiError) as exc_info:
            client.login("me@example.com", "secret")
        
        error = exc_info.value
        assert error.message == "Connection refused"
        assert error.code == 0
        assert error.raw_data is None
    
    def test_base_url_without_scheme(self):
        """Test a URL that cannot be prepared becomes ApiError."""
        with TingTingClient(ClientConfig(base_url="app.tingting.io/api/v1/")) as client:
            with pytest.raises(ApiError) as exc_info:
                client.user_detail()
        
        error = exc_info.value
        assert error.code == 0
        assert error.raw_data is None
        assert isinstance(error.__cause__, requests.exceptions.MissingSchema)
        assert "No scheme supplied" in error.message
    
    def test_unserialisable_body(self, client, send):
        """Test a body that is not valid JSON becomes ApiError before sending."""
        with pytest.raises(ApiError) as exc_info:
            client.create_campaign({"budget": float("nan")})
        
        assert exc_info.value.code == 0
        assert isinstance(exc_info.value.__cause__, requests.exceptions.InvalidJSONError)
        send.assert_not_called()
    
    def test_api_error_is_tingting_error(self, client, send):
        """Test callers can catch the package base error."""
        send.return_value = make_response(403, {"message": "forbidden"})
        
        with pytest.raises(TingTingError):
            client.generate_api_keys()


class TestSessionLifecycle:
    """Tests for session management."""
    
    def test_close_resets_session(self, config):
        """Test close drops the session and a new one is created lazily."""
        http = HTTPClient(config)
        first = http.session
        http.close()
        
        assert http._session is None
        assert http.session is not first
    
    def test_user_agent(self, config):
        """Test session identifies the client."""
        http = HTTPClient(config)
        
        assert http.session.headers["User-Agent"].startswith("tingting-cli/")
