from datetime import datetime


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp with a trailing Z."""
    assert isinstance(value, str), f"Timestamp is not a string: {value!r}"
    assert value.endswith("Z"), f"Timestamp is not UTC: {value}"
    return datetime.fromisoformat(value[:-1] + "+00:00")


def assert_error_body(response, status_code, message):
    """Assert the standard {"error": ...} body and status."""
    assert response.status_code == status_code, response.text
    assert response.json() == {"error": message}


def posted_json(mock_client):
    """JSON body of the single upstream POST."""
    mock_client.post.assert_awaited_once()
    return mock_client.post.await_args.kwargs["json"]


def posted_headers(mock_client):
    """Headers of the single upstream POST."""
    mock_client.post.assert_awaited_once()
    return mock_client.post.await_args.kwargs["headers"]
