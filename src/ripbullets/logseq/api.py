"""Client for the Logseq HTTP API server.

Logseq exposes its plugin API over HTTP when "Developer mode" and the API
server are enabled (Settings > Features). Every call is a POST to ``/api``
with a JSON body ``{"method": "logseq.Editor.xxx", "args": [...]}`` and a
bearer token.
"""

import httpx
from typing import Any

from ripbullets.models.block import Block
from ripbullets.models.config import LogseqConfig
from ripbullets.services.exceptions import LogseqAPIError
from ripbullets.utils.logging import get_logger


logger = get_logger(__name__)

GET_CURRENT_PAGE_BLOCKS_TREE = "logseq.Editor.getCurrentPageBlocksTree"
GET_PAGE_BLOCKS_TREE = "logseq.Editor.getPageBlocksTree"
SHOW_MSG = "logseq.UI.showMsg"


class LogseqAPIClient:
    """
    Async HTTP client for a running Logseq instance.

    Example:
        >>> client = LogseqAPIClient(config.logseq)
        >>> blocks = await client.get_current_page_blocks_tree()
    """

    def __init__(self, config: LogseqConfig):
        """
        Initialize Logseq API client.

        Args:
            config: Logseq configuration (API URL, token, timeout)
        """
        self.config = config
        self.endpoint = f"{str(config.api_url).rstrip('/')}/api"
        self.timeout = httpx.Timeout(config.timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_token:
            headers["Authorization"] = f"Bearer {self.config.api_token}"
        return headers

    async def call(self, method: str, *args: Any) -> Any:
        """
        Invoke a Logseq API method.

        Args:
            method: Fully qualified method name (e.g. "logseq.Editor.getPageBlocksTree")
            *args: Positional arguments for the method

        Returns:
            Decoded JSON result (may be None)

        Raises:
            LogseqAPIError: On connection failure, non-2xx status, invalid JSON
                or an error payload from Logseq
        """
        payload = {"method": method, "args": list(args)}
        logger.debug("logseq_api_request", method=method, args=list(args))

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    json=payload,
                    headers=self._headers(),
                )
                response.raise_for_status()
                result = response.json()

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("logseq_api_http_error", method=method, status_code=status)
            if status == 401:
                raise LogseqAPIError(
                    method,
                    "Unauthorized - check api_token in config.yaml",
                    status_code=status,
                ) from e
            raise LogseqAPIError(method, f"HTTP {status}", status_code=status) from e

        except httpx.ConnectError as e:
            logger.error("logseq_api_connect_error", method=method, endpoint=self.endpoint)
            raise LogseqAPIError(
                method,
                f"Cannot connect to Logseq at {self.endpoint} - is the API server running?",
            ) from e

        except httpx.HTTPError as e:
            logger.error("logseq_api_error", method=method, error=str(e))
            raise LogseqAPIError(method, str(e) or type(e).__name__) from e

        except ValueError as e:
            logger.error("logseq_api_invalid_json", method=method, error=str(e))
            raise LogseqAPIError(method, "Invalid JSON in response") from e

        if isinstance(result, dict) and "error" in result:
            logger.error("logseq_api_error_payload", method=method, error=result["error"])
            raise LogseqAPIError(method, str(result["error"]))

        logger.debug("logseq_api_response", method=method, result_type=type(result).__name__)
        return result

    async def get_current_page_blocks_tree(self) -> list[Block]:
        """
        Fetch the block tree of the page currently open in Logseq.

        Returns:
            Root blocks (empty if no page is open)
        """
        result = await self.call(GET_CURRENT_PAGE_BLOCKS_TREE)
        return Block.forest_from_payload(result)

    async def get_page_blocks_tree(self, page_name: str) -> list[Block]:
        """
        Fetch the block tree of a named page.

        Args:
            page_name: Page name (case-insensitive in Logseq)

        Returns:
            Root blocks (empty if the page doesn't exist or is empty)
        """
        result = await self.call(GET_PAGE_BLOCKS_TREE, page_name)
        return Block.forest_from_payload(result)

    async def show_msg(self, message: str, status: str = "success") -> None:
        """
        Show a message in Logseq's UI.

        Args:
            message: Text to display
            status: One of "success", "warning", "error"
        """
        await self.call(SHOW_MSG, message, status)
