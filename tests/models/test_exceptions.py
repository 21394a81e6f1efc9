import httpx
import pytest

from httprest import RestClientError, RestResult, TransportError


class TestRestClientError:
    def test_attributes(self):
        error = RestClientError(
            404,
            "Not Found",
            "not found",
            method="GET",
            url=httpx.URL("https://test.example.com/v1/person"),
        )

        assert error.status_code == 404
        assert error.reason_phrase == "Not Found"
        assert error.payload == "not found"
        assert error.method == "GET"
        assert error.url == "https://test.example.com/v1/person"

    def test_message(self):
        error = RestClientError(500, "Internal Server Error", "boom", method="POST", url="/jobs")

        assert str(error) == (
            "An error occurred while performing an HTTP request: "
            "500 Internal Server Error (POST /jobs)\nResponse content: boom"
        )

    def test_minimal_message(self):
        error = RestClientError(503)

        assert str(error) == "An error occurred while performing an HTTP request: 503"
        assert error.reason_phrase is None
        assert error.payload is None

    def test_long_payload_is_truncated_in_message(self):
        error = RestClientError(400, payload="x" * 500)

        assert error.payload == "x" * 500
        assert str(error).endswith("x" * 200)
        assert "x" * 201 not in str(error)

    def test_repr(self):
        assert repr(RestClientError(404, "Not Found")) == (
            "RestClientError(status_code=404, reason_phrase='Not Found')"
        )

    def test_transport_error_is_httpx_error(self):
        assert TransportError is httpx.TransportError
        assert not issubclass(TransportError, RestClientError)


class TestRestResult:
    def test_success(self):
        result = RestResult(value=5)

        assert result.is_success
        assert result.unwrap() == 5

    def test_success_without_value(self):
        result: RestResult[None] = RestResult()

        assert result.is_success
        assert result.unwrap() is None

    def test_failure(self):
        error = RestClientError(404, "Not Found")
        result: RestResult[int] = RestResult(error=error)

        assert not result.is_success
        with pytest.raises(RestClientError) as exc_info:
            result.unwrap()
        assert exc_info.value is error
