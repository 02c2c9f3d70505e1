"""HTTP client for fetching conversations from the claude.ai API."""

import logging
from typing import Any, Optional

import httpx

from .errors import RetrievalError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://claude.ai"
CONVERSATION_QUERY = {
    "tree": "True",
    "rendering_mode": "messages",
    "render_all_tools": "true",
}


def _raise_for_status(resp: httpx.Response) -> None:
    if resp.status_code < 400:
        return
    message = f"HTTP {resp.status_code} {resp.reason_phrase}".strip()
    try:
        payload = resp.json()
        detail = payload.get("error", {}).get("message")
        if isinstance(detail, str) and detail.strip():
            message = f"{message}: {detail}"
    except (ValueError, AttributeError):
        pass
    raise RetrievalError(
        f"Failed to fetch conversation data: {message}", resp.status_code
    )


class ClaudeClient:
    """httpx.Client wrapper that authenticates with a claude.ai session key."""

    def __init__(
        self,
        session_key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        headers = {"Accept": "application/json"}
        if session_key:
            headers["Cookie"] = f"sessionKey={session_key}"
        self.client = httpx.Client(
            base_url=base_url, headers=headers, transport=transport
        )

    def conversation_url(self, org_id: str, conversation_id: str) -> str:
        return f"/api/organizations/{org_id}/chat_conversations/{conversation_id}"

    def fetch_conversation(self, org_id: str, conversation_id: str) -> Any:
        """Fetch the raw conversation document.

        Raises:
            RetrievalError: On transport failure, an error status, or a
                response body that is not JSON
        """
        if not org_id or not conversation_id:
            raise RetrievalError(
                "Both an organization id and a conversation id are required"
            )
        url = self.conversation_url(org_id, conversation_id)
        logger.debug("Fetching %s%s", self.client.base_url, url)
        try:
            resp = self.client.get(url, params=CONVERSATION_QUERY)
        except httpx.HTTPError as e:
            raise RetrievalError(f"Failed to fetch conversation data: {e}") from e

        _raise_for_status(resp)
        try:
            return resp.json()
        except ValueError as e:
            raise RetrievalError(
                f"Conversation response is not valid JSON: {e}", resp.status_code
            ) from e

    def close(self) -> None:
        """Close the underlying httpx client."""
        self.client.close()

    def __enter__(self) -> "ClaudeClient":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
