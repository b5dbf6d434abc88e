"""Error Hierarchy: tests for codes, statuses, and user-facing messages."""

import pytest

from lendshelf.core.errors import (
    AuthenticationError,
    AuthorizationError,
    DuplicateError,
    ErrorCategory,
    ErrorContext,
    LendShelfError,
    NotFoundError,
    StoreError,
    UploadError,
    ValidationError,
)

ALL_ERRORS = [
    AuthenticationError(),
    AuthorizationError("not yours"),
    ValidationError("bad", "price"),
    DuplicateError("listing-1", "user-1"),
    NotFoundError("Listing", "listing-1"),
    StoreError("boom", "commit"),
    UploadError("too big"),
]


@pytest.mark.parametrize(
    "error, status",
    zip(ALL_ERRORS, [401, 403, 400, 409, 404, 503, 502]),
)
def test_http_status_per_kind(error, status):
    assert error.http_status == status


def test_every_kind_has_a_distinct_user_message():
    messages = [type(e).user_message for e in ALL_ERRORS]
    assert len(set(messages)) == len(messages)
    assert LendShelfError.user_message not in messages


def test_duplicate_is_a_conflict_not_a_validation_error():
    error = DuplicateError("listing-1", "user-1")
    assert error.category == ErrorCategory.CONFLICT
    assert not isinstance(error, ValidationError)


def test_to_response_envelope():
    body = NotFoundError("Listing", "abc").to_response()
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert body["error"]["message"] == "Listing 'abc' not found"
    assert body["error"]["category"] == "resource_not_found"
    assert "user_message" in body["error"]


def test_validation_error_response_names_field():
    body = ValidationError("Price must be greater than zero", "price").to_response()
    assert body["error"]["field"] == "price"


def test_store_error_hides_cause_in_user_message():
    error = StoreError("connection reset by peer", "execute")
    assert "connection reset" not in error.user_message


def test_to_response_carries_listing_and_user_context():
    context = ErrorContext(listing_id="listing-1", user_id="user-1")
    body = DuplicateError("listing-1", "user-1", context).to_response()
    assert body["error"]["context"] == {"listing_id": "listing-1", "user_id": "user-1"}
