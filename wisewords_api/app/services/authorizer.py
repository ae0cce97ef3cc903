"""
Ownership checks.

Only contributors carry an owner.  Quotes are guarded by the
contributor they reference: callers load that contributor first and
then pass it here.
"""

import logging

from wisewords_api.app.core.errors import AuthenticationFailedError
from wisewords_api.app.schemas.contributor import Contributor


logger = logging.getLogger(__name__)


def check_owner(contributor: Contributor, caller: str) -> None:
    """Raise ``AuthenticationFailedError`` unless ``caller`` owns ``contributor``."""
    if contributor.owner != caller:
        logger.warning(
            "Caller %s rejected for contributor %s owned by %s",
            caller,
            contributor.id,
            contributor.owner,
        )
        raise AuthenticationFailedError(caller, contributor.id)
