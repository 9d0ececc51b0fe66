"""Unit tests for app.api.models.schemas."""

import pytest
from pydantic import ValidationError

from app.api.models.schemas import GenerationRequest


def test_valid_request_parses():
    request = GenerationRequest.model_validate_json(
        b'{"destination":"Oslo","duration":"3 days","num_people":"2","activities":["museums"]}'
    )
    assert request.destination == "Oslo"
    assert request.activities == ["museums"]


def test_extra_fields_are_ignored():
    request = GenerationRequest.model_validate_json(
        b'{"destination":"Oslo","duration":"3 days","num_people":"2","activities":[],"budget":100}'
    )
    assert not hasattr(request, "budget")


@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b'{"duration":"3 days","num_people":"2","activities":[]}',
        b'{"destination":"Oslo","duration":"3 days","num_people":2,"activities":[]}',
        b'{"destination":"Oslo","duration":"3 days","num_people":"2","activities":"hiking"}',
        b'{"destination":"Oslo","duration":"3 days","num_people":"2","activities":[1, 2]}',
    ],
)
def test_invalid_bodies_are_rejected(body):
    with pytest.raises(ValidationError):
        GenerationRequest.model_validate_json(body)
