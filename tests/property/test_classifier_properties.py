"""Property tests for outcome classification.

# Property 5: Status classes map to one kind each
# Property 6: Retryability follows the kind
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from goldrush.errors import ERROR_TYPES, ErrorKind
from goldrush.http.classifier import classify, error_for, is_retryable
from goldrush.models.envelope import ApiErrorBody, ResponseEnvelope


# --- Strategies ---

server_statuses = st.integers(min_value=500, max_value=599)
client_statuses = st.integers(min_value=400, max_value=499).filter(lambda s: s != 429)
other_statuses = st.one_of(
    st.integers(min_value=100, max_value=199),
    st.integers(min_value=300, max_value=399),
)
success_statuses = st.integers(min_value=200, max_value=299)
any_statuses = st.integers(min_value=100, max_value=599)
error_bodies = st.builds(
    ApiErrorBody,
    code=st.none() | st.integers(min_value=0, max_value=10_000),
    message=st.none() | st.text(max_size=40),
)


# --- Property 5: Status classes map to one kind each ---

@settings(max_examples=100)
@given(status=server_statuses)
def test_5xx_is_server_failure(status: int) -> None:
    assert classify(status).kind is ErrorKind.SERVER_FAILURE


@settings(max_examples=100)
@given(status=client_statuses)
def test_4xx_is_client_request_error(status: int) -> None:
    assert classify(status).kind is ErrorKind.CLIENT_REQUEST_ERROR


@settings(max_examples=100)
@given(status=other_statuses)
def test_non_2xx_outside_4xx_5xx_is_client_request_error(status: int) -> None:
    assert classify(status).kind is ErrorKind.CLIENT_REQUEST_ERROR


@settings(max_examples=100)
@given(status=success_statuses, body=error_bodies)
def test_2xx_with_error_is_domain_error(status: int, body: ApiErrorBody) -> None:
    result = classify(status, envelope=ResponseEnvelope(error=body))
    assert result.kind is ErrorKind.API_DOMAIN_ERROR
    assert result.error.code == body.code


@settings(max_examples=100)
@given(status=success_statuses, data=st.none() | st.dictionaries(st.text(max_size=5), st.integers()))
def test_2xx_without_error_is_success(status: int, data: dict | None) -> None:
    assert classify(status, envelope=ResponseEnvelope(data=data)) is None


# --- Property 6: Retryability follows the kind ---

@settings(max_examples=100)
@given(status=any_statuses, body=st.none() | error_bodies)
def test_retryable_flag_matches_kind(status: int, body: ApiErrorBody | None) -> None:
    result = classify(status, error_body=body)
    if result is None:
        return
    assert result.retryable is is_retryable(result.kind)
    assert result.retryable is (status == 429 or 500 <= status <= 599)


@settings(max_examples=100)
@given(status=any_statuses, body=st.none() | error_bodies)
def test_classification_is_deterministic(status: int, body: ApiErrorBody | None) -> None:
    assert classify(status, error_body=body) == classify(status, error_body=body)


@given(kind=st.sampled_from(list(ErrorKind)))
def test_error_types_agree_with_classifier(kind: ErrorKind) -> None:
    assert ERROR_TYPES[kind].kind is kind
    assert ERROR_TYPES[kind].retryable is is_retryable(kind)


@settings(max_examples=100)
@given(status=st.one_of(server_statuses, client_statuses, st.just(429)), body=error_bodies)
def test_error_keeps_status_and_code(status: int, body: ApiErrorBody) -> None:
    error = error_for(classify(status, error_body=body), attempts=1)
    assert error.status_code == status
    assert error.code == body.code
    assert error.attempts == 1
