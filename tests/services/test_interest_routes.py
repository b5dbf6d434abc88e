"""Interest Routes: HTTP behavior of POST /api/v1/listings/{id}/interests.

Invariants:
    - 201 with the stored interest on success
    - 401 anonymous, 400 invalid, 404 missing listing, 409 duplicate
"""

from datetime import timedelta
from uuid import uuid4

from tests.services.actors import BORROWER, headers_for


def _form(start, end, **overrides):
    body = {
        "contact_name": "Alice",
        "contact_email": "a@x.com",
        "message": "Weekend project",
        "borrow_start_date": start.isoformat(),
        "borrow_end_date": end.isoformat(),
    }
    body.update(overrides)
    return body


async def test_submit_interest_returns_201(client, drill, tomorrow):
    res = await client.post(
        f"/api/v1/listings/{drill.id}/interests",
        json=_form(tomorrow, tomorrow + timedelta(days=2)),
        headers=headers_for(BORROWER),
    )

    assert res.status_code == 201
    data = res.json()
    assert data["borrower_id"] == BORROWER.id
    assert data["listing_id"] == str(drill.id)
    assert data["borrow_end_date"] == (tomorrow + timedelta(days=2)).isoformat()


async def test_anonymous_submit_is_401(client, drill, tomorrow):
    res = await client.post(
        f"/api/v1/listings/{drill.id}/interests", json=_form(tomorrow, tomorrow),
    )

    assert res.status_code == 401


async def test_duplicate_submit_is_409_with_user_message(client, drill, tomorrow):
    url = f"/api/v1/listings/{drill.id}/interests"
    first = await client.post(url, json=_form(tomorrow, tomorrow), headers=headers_for(BORROWER))
    second = await client.post(url, json=_form(tomorrow, tomorrow), headers=headers_for(BORROWER))

    assert first.status_code == 201
    assert second.status_code == 409
    error = second.json()["error"]
    assert error["code"] == "DUPLICATE_INTEREST"
    assert error["user_message"] == "You've already shown interest in this item."
    assert error["context"] == {"listing_id": str(drill.id), "user_id": BORROWER.id}


async def test_end_before_start_is_400(client, drill, tomorrow):
    res = await client.post(
        f"/api/v1/listings/{drill.id}/interests",
        json=_form(tomorrow + timedelta(days=3), tomorrow),
        headers=headers_for(BORROWER),
    )

    assert res.status_code == 400
    assert res.json()["error"]["field"] == "borrow_end_date"


async def test_blank_contact_name_is_400(client, drill, tomorrow):
    res = await client.post(
        f"/api/v1/listings/{drill.id}/interests",
        json=_form(tomorrow, tomorrow, contact_name="   "),
        headers=headers_for(BORROWER),
    )

    assert res.status_code == 400
    assert res.json()["error"]["field"] == "contact_name"


async def test_missing_listing_is_404(client, tomorrow):
    res = await client.post(
        f"/api/v1/listings/{uuid4()}/interests",
        json=_form(tomorrow, tomorrow),
        headers=headers_for(BORROWER),
    )

    assert res.status_code == 404


async def test_malformed_contact_email_is_400(client, drill, tomorrow):
    res = await client.post(
        f"/api/v1/listings/{drill.id}/interests",
        json=_form(tomorrow, tomorrow, contact_email="not-an-email"),
        headers=headers_for(BORROWER),
    )

    assert res.status_code == 400
    assert res.json()["error"]["field"] == "contact_email"
