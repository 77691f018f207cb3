import uuid

from birdwatch.common.core import request_context


def test_generate_request_id_creates_uuid():
    """Ensure generate_request_id() creates a UUIDv4 and sets it in context."""
    req_id = request_context.generate_request_id()

    assert str(uuid.UUID(req_id)) == req_id
    assert request_context.get_request_id() == req_id


def test_generate_request_id_is_unique():
    assert request_context.generate_request_id() != request_context.generate_request_id()


def test_set_and_clear_request_id():
    request_context.set_request_id("req-123")
    assert request_context.get_request_id() == "req-123"

    request_context.clear_request_id()
    assert request_context.get_request_id() is None
