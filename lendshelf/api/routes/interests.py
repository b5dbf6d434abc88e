"""Interests: the "show interest" endpoint.

Invariants:
    - Anonymous callers get 401 from the submission protocol itself, so the
      same rule holds for every entry point
    - Duplicate submissions return 409 with a user-facing "already interested" message
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from lendshelf.api.dependencies import get_identity, get_submission
from lendshelf.core.identity import Identity
from lendshelf.schemas.interest import InterestCreate, InterestResponse
from lendshelf.services.interest_submission import InterestSubmission

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/listings", tags=["interests"])


@router.post(
    "/{listing_id}/interests", response_model=InterestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_interest(
    listing_id: UUID,
    body: InterestCreate,
    identity: Identity | None = Depends(get_identity),
    submission: InterestSubmission = Depends(get_submission),
):
    interest = await submission.submit(
        identity, listing_id, body.contact(),
        message=body.message,
        borrow_start=body.borrow_start_date,
        borrow_end=body.borrow_end_date,
    )
    return InterestResponse.model_validate(interest)
