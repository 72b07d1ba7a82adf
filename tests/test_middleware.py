import logging

import pytest
from fastapi import FastAPI
from fastapi.responses import StreamingResponse
from fastapi.testclient import TestClient
from pydantic import BaseModel

from goodschain.api.exception_handlers import register_exception_handlers
from goodschain.api.middleware import ErrorHandlingMiddleware
from goodschain.errors import AppError, ErrorCode, not_found

ACCESS_LOGGER = "tests.access"


class Payload(BaseModel):
    price: int


def build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(ErrorHandlingMiddleware, logger=logging.getLogger(ACCESS_LOGGER))
    register_exception_handlers(app)

    @app.get("/ok")
    def ok():
        return {"status": "ok"}

    @app.get("/missing")
    def missing():
        raise not_found("Customer", "c-1")

    @app.get("/conflict")
    def conflict():
        raise AppError(ErrorCode.ALREADY_EXISTS, "already there").with_details(table="customer")

    @app.get("/boom")
    def boom():
        raise RuntimeError("password=hunter2 leaked from driver")

    @app.get("/wrapped")
    def wrapped():
        try:
            raise AppError(ErrorCode.FORBIDDEN, "no access")
        except AppError as exc:
            raise RuntimeError("outer") from exc

    @app.post("/validate")
    def validate(payload: Payload):
        return payload

    @app.get("/stream")
    def stream():
        def chunks():
            yield b"partial"
            raise RuntimeError("stream broke")

        return StreamingResponse(chunks())

    return app


@pytest.fixture
def client():
    return TestClient(build_app())


# ============================================================================
# ERROR ENVELOPE
# ============================================================================


def test_app_error_not_found_envelope(client):
    response = client.get("/missing")
    assert response.status_code == 404
    assert response.json() == {"code": "NOT_FOUND", "message": "Customer with ID 'c-1' not found"}


def test_app_error_details_are_not_serialized(client):
    response = client.get("/conflict")
    assert response.status_code == 409
    assert response.json() == {"code": "ALREADY_EXISTS", "message": "already there"}


def test_unmatched_route_gets_not_found_envelope_once(client):
    response = client.get("/no/such/route")
    assert response.status_code == 404
    assert response.json() == {"code": "NOT_FOUND", "message": "Resource not found"}


def test_method_not_allowed_keeps_status(client):
    response = client.delete("/ok")
    assert response.status_code == 405
    assert response.json() == {"code": "INVALID_INPUT", "message": "Method Not Allowed"}


def test_unknown_exception_is_internal_error_without_raw_text(client):
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"code": "INTERNAL_ERROR", "message": "Internal server error"}
    assert "hunter2" not in response.text


def test_app_error_found_in_cause_chain(client):
    response = client.get("/wrapped")
    assert response.status_code == 403
    assert response.json() == {"code": "FORBIDDEN", "message": "no access"}


def test_validation_error_is_invalid_input(client):
    response = client.post("/validate", json={"price": "not a number"})
    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "INVALID_INPUT"
    assert "price" in data["message"]


def test_malformed_json_is_invalid_input(client):
    response = client.post(
        "/validate", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"


def test_error_after_response_started_is_not_written_twice(caplog):
    caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
    client = TestClient(build_app(), raise_server_exceptions=False)
    response = client.get("/stream")
    assert response.status_code == 200
    assert b"INTERNAL_ERROR" not in response.content

    records = [r for r in caplog.records if r.name == ACCESS_LOGGER]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].status_code == 200
    assert records[0].error_code == "INTERNAL_ERROR"


# ============================================================================
# REQUEST ID
# ============================================================================


def test_request_id_generated_when_absent(client):
    response = client.get("/ok")
    assert response.status_code == 200
    assert response.headers["X-Request-ID"]


def test_request_id_reused_from_inbound_header(client):
    response = client.get("/missing", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_on_internal_error_response(client):
    response = client.get("/boom", headers={"X-Request-ID": "req-500"})
    assert response.headers["X-Request-ID"] == "req-500"


# ============================================================================
# REQUEST LOGGING
# ============================================================================


def _access_records(caplog):
    return [r for r in caplog.records if r.name == ACCESS_LOGGER]


def test_successful_request_logged_at_info(client, caplog):
    caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
    client.get("/ok", headers={"User-Agent": "pytest-agent"})

    records = _access_records(caplog)
    assert len(records) == 1
    record = records[0]
    assert record.levelno == logging.INFO
    assert record.method == "GET"
    assert record.path == "/ok"
    assert record.status_code == 200
    assert record.user_agent == "pytest-agent"
    assert record.latency_ms >= 0
    assert record.client_ip


def test_client_error_logged_at_warning_with_error_code(client, caplog):
    caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
    client.get("/missing")

    records = _access_records(caplog)
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].error_code == "NOT_FOUND"
    assert records[0].status_code == 404


def test_internal_error_logged_with_original_exception(client, caplog):
    caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
    client.get("/boom")

    records = _access_records(caplog)
    assert len(records) == 1
    record = records[0]
    assert record.levelno == logging.ERROR
    assert record.error_code == "INTERNAL_ERROR"
    assert record.exc_info is not None
    assert "hunter2" in str(record.exc_info[1])
