import json

import pytest
from fastapi import HTTPException

from src.api.core.response import api_response, raiseExceptions
from src.api.models.product_model import UndoResult


def test_api_response_envelope_passes_data_through():
    response = api_response(200, "ok", {"price": 100, "result": UndoResult(deleted_variants=2)}, total=3)

    body = json.loads(response.body)
    assert response.status_code == 200
    assert body == {
        "success": 1,
        "detail": "ok",
        "data": {
            "price": 100,
            "result": {"deleted_products": 0, "deleted_variants": 2, "is_undone": False},
        },
        "total": 3,
    }


def test_api_response_raises_for_error_codes():
    with pytest.raises(HTTPException) as exc:
        api_response(404, "Import record not found")
    assert exc.value.status_code == 404
    assert exc.value.detail == "Import record not found"


def test_raise_exceptions_checks_each_condition():
    assert raiseExceptions(([1], 400, "empty")) is None
    with pytest.raises(HTTPException) as exc:
        raiseExceptions(([1], 400, "first"), ([], 422, "second"))
    assert exc.value.status_code == 422
    assert exc.value.detail == "second"
