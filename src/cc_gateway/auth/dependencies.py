"""FastAPI dependencies: get_current_user, require_card_owner.

Usage in any protected router:
    from src.cc_gateway.auth.dependencies import require_card_owner

    @router.get("/protected")
    async def protected(user: UserAccount = Depends(require_card_owner)):
        ...
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from src.cc_common.errors import AuthenticationFailedError, CardOwnerRoleRequiredError
from src.cc_gateway.auth.users import (
    CARD_OWNER_ROLE,
    UserAccount,
    UserStoreProtocol,
    authenticate,
    get_user_store,
)

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through the same 401 path as bad credentials
basic_scheme = HTTPBasic(auto_error=False)


async def get_current_user(
    credentials: HTTPBasicCredentials | None = Depends(basic_scheme),
    store: UserStoreProtocol = Depends(get_user_store),
) -> UserAccount:
    """Validate HTTP Basic credentials, return the UserAccount.

    Raises HTTP 401 (AuthenticationFailedError, with WWW-Authenticate: Basic)
    if the header is missing or the credentials are wrong.
    """
    if credentials is None:
        raise AuthenticationFailedError()

    user = authenticate(store, credentials.username, credentials.password)
    if user is None:
        logger.warning("Basic auth failed for username=%r", credentials.username)
        raise AuthenticationFailedError()

    return user


async def require_card_owner(
    current_user: UserAccount = Depends(get_current_user),
) -> UserAccount:
    """Verify the caller holds the CARD-OWNER role.

    Raises HTTP 403 (CardOwnerRoleRequiredError) otherwise. Per-record
    ownership is checked separately by the cash card service.
    """
    if not current_user.has_role(CARD_OWNER_ROLE):
        raise CardOwnerRoleRequiredError()
    return current_user
