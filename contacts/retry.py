"""Single-retry policy for contact fetches with an expired access token

Initial -> Done on success. Initial -> Retried after a failed fetch and a
successful token refresh. Retried -> Done or Failed. There is no
Retried -> Retried transition, so at most two fetches are made.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, List, Optional

from errors import UpstreamContactFetchError
from podio_oauth.credentials import CredentialPair
from .models import Contact

logger = logging.getLogger(__name__)

ListContacts = Callable[[str], Awaitable[List[Contact]]]
RefreshAccessToken = Callable[[str], Awaitable[str]]


class RetryState(Enum):
    INITIAL = "initial"
    RETRIED = "retried"
    DONE = "done"
    FAILED = "failed"


def next_state(state: RetryState, succeeded: bool) -> RetryState:
    """Transition after one fetch attempt"""
    if state not in (RetryState.INITIAL, RetryState.RETRIED):
        raise ValueError(f"No transition out of terminal state {state.value}")
    if succeeded:
        return RetryState.DONE
    if state is RetryState.INITIAL:
        return RetryState.RETRIED
    return RetryState.FAILED


async def get_contacts_with_retry(
    credentials: CredentialPair,
    list_contacts: ListContacts,
    refresh_access_token: RefreshAccessToken,
) -> List[Contact]:
    """Fetch contacts, refreshing the access token and retrying once on failure

    Args:
        credentials: Access/refresh token pair
        list_contacts: Fetches contacts for an access token
        refresh_access_token: Derives a new access token from the refresh token

    Returns:
        Normalized contacts

    Raises:
        UpstreamContactFetchError: If the retried fetch fails too
        UpstreamAuthError: If the token refresh fails
    """
    state = RetryState.INITIAL
    access_token = credentials.access_token

    while True:
        error: Optional[UpstreamContactFetchError] = None
        contacts: List[Contact] = []
        try:
            contacts = await list_contacts(access_token)
        except UpstreamContactFetchError as e:
            error = e

        state = next_state(state, error is None)
        if state is RetryState.DONE:
            return contacts
        if state is RetryState.FAILED:
            logger.error("Contact fetch failed again after token refresh")
            raise error

        logger.warning("Contact fetch failed, refreshing access token and retrying once")
        # A refresh failure propagates: Initial -> Failed
        access_token = await refresh_access_token(credentials.refresh_token)
