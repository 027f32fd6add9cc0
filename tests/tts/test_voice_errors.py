from __future__ import annotations

import pickle

import pytest

from watsonkit.errors import ErrorKind
from watsonkit.tts.voices import (
    GET_VOICE_CLASSIFIER,
    LIST_VOICES_CLASSIFIER,
    GetVoiceError,
    ListVoicesError,
)


@pytest.mark.parametrize(
    ("status", "kind", "message"),
    [
        (
            406,
            ErrorKind.NOT_ACCEPTABLE,
            "The request specified an Accept header with an incompatible content type.",
        ),
        (
            415,
            ErrorKind.UNSUPPORTED_MEDIA_TYPE,
            "The request specified an unacceptable media type.",
        ),
        (500, ErrorKind.INTERNAL_SERVER_ERROR, "The service experienced an internal error."),
        (503, ErrorKind.SERVICE_UNAVAILABLE, "The service is currently unavailable."),
    ],
)
def test_list_voices_status_mapping(status: int, kind: ErrorKind, message: str) -> None:
    error = LIST_VOICES_CLASSIFIER.classify(status)

    assert isinstance(error, ListVoicesError)
    assert error.kind is kind
    assert error.message == message


def test_list_voices_statuses_map_to_distinct_kinds() -> None:
    kinds = [LIST_VOICES_CLASSIFIER.classify(status).kind for status in (406, 415, 500, 503)]

    assert len(set(kinds)) == 4
    assert LIST_VOICES_CLASSIFIER.statuses == (406, 415, 500, 503)


def test_list_voices_has_no_not_modified_rule() -> None:
    assert LIST_VOICES_CLASSIFIER.classify(304).kind is ErrorKind.UNEXPECTED_STATUS


def test_get_voice_unauthorised_carries_customisation_id() -> None:
    error = GET_VOICE_CLASSIFIER.classify(401, customisation_id="custom-id-123")

    assert isinstance(error, GetVoiceError)
    assert error.kind is ErrorKind.UNAUTHORISED
    assert "custom-id-123" in str(error)
    assert error.customisation_id == "custom-id-123"


def test_get_voice_not_modified() -> None:
    error = GET_VOICE_CLASSIFIER.classify(304)

    assert error.kind is ErrorKind.NOT_MODIFIED
    assert "If-Modified-Since" in error.message


def test_get_voice_bad_request_mentions_customisation_id() -> None:
    error = GET_VOICE_CLASSIFIER.classify(400)

    assert error.kind is ErrorKind.BAD_REQUEST
    assert "customisation id" in error.message


def test_get_voice_covers_every_documented_status() -> None:
    assert GET_VOICE_CLASSIFIER.statuses == (304, 400, 401, 406, 415, 500, 503)
    kinds = {GET_VOICE_CLASSIFIER.classify(status).kind for status in GET_VOICE_CLASSIFIER.statuses}
    assert len(kinds) == len(GET_VOICE_CLASSIFIER.statuses)


def test_shared_statuses_keep_operation_specific_types() -> None:
    listed = LIST_VOICES_CLASSIFIER.classify(406)
    fetched = GET_VOICE_CLASSIFIER.classify(406)

    assert listed.message == fetched.message
    assert isinstance(listed, ListVoicesError)
    assert isinstance(fetched, GetVoiceError)
    assert listed != fetched


def test_get_voice_classification_is_idempotent() -> None:
    first = GET_VOICE_CLASSIFIER.classify(401, customisation_id="custom-id-123")
    second = GET_VOICE_CLASSIFIER.classify(401, customisation_id="custom-id-123")

    assert first == second


def test_connection_errors_are_operation_typed() -> None:
    error = GET_VOICE_CLASSIFIER.connection_error("tls handshake failed")

    assert isinstance(error, GetVoiceError)
    assert error.kind is ErrorKind.CONNECTION
    assert error.message == "tls handshake failed"


def test_equal_errors_hash_alike() -> None:
    first = GET_VOICE_CLASSIFIER.classify(401, customisation_id="c1")
    second = GET_VOICE_CLASSIFIER.classify(401, customisation_id="c1")

    assert hash(first) == hash(second)
    assert {first, second} == {first}
    assert hash(first) != hash(GET_VOICE_CLASSIFIER.classify(401, customisation_id="c2"))


def test_errors_survive_pickling() -> None:
    error = GET_VOICE_CLASSIFIER.classify(401, customisation_id="c1")

    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is GetVoiceError
    assert restored == error
    assert restored.customisation_id == "c1"
    assert restored.args == (error.message,)
