"""Header Identity Provider: resolves the signed-in user from gateway-set headers.

Invariants:
    - Returns None (anonymous) when the id header is missing or blank
    - Never raises: deciding whether anonymity is acceptable is the caller's job
    - Ids longer than the column width are treated as anonymous

Design Decisions:
    - Sign-in/sign-out and token verification live in the upstream auth gateway;
      this service only trusts the headers that gateway forwards
"""

import logging
from typing import Mapping

from lendshelf.core.domain_types import UserId
from lendshelf.core.identity import Identity

logger = logging.getLogger(__name__)

MAX_USER_ID_LENGTH = 64


class HeaderIdentityProvider:
    """Reads Identity from request headers."""

    def __init__(self, id_header: str, email_header: str | None = None):
        self.id_header = id_header
        self.email_header = email_header

    def current_identity(self, headers: Mapping[str, str]) -> Identity | None:
        raw_id = (headers.get(self.id_header) or "").strip()
        if not raw_id:
            return None
        if len(raw_id) > MAX_USER_ID_LENGTH:
            logger.warning(
                f"Ignoring identity header longer than {MAX_USER_ID_LENGTH} chars",
            )
            return None
        email = None
        if self.email_header:
            email = (headers.get(self.email_header) or "").strip() or None
        return Identity(id=UserId(raw_id), email=email)
