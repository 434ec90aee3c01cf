import asyncio
import logging

import aiohttp

from .config import STEAM_API_KEY
from .constants import STEAM_API_URL
from .exceptions import APIError, MalformedResponse, MissingField, NetworkError, WorkshopException
from .models import ModMetadata
from .network import FORM_HEADERS
from .parser import build_request_form, decode_details, to_mod_metadata

logger = logging.getLogger(__name__)


class WorkshopAPIManager:
    """
    Looks up Steam Workshop item metadata through ISteamRemoteStorage.
    The session is owned by the caller, so its timeout applies unless one is given here.
    """

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str = STEAM_API_KEY,
        timeout: aiohttp.ClientTimeout | None = None,
    ):
        self.session = session
        # Not sent: GetPublishedFileDetails is anonymous. Kept for existing `STEAM_API_KEY` configs.
        self.api_key = api_key
        self.timeout = timeout

    async def fetch_mod_metadata(self, mod_id: int) -> ModMetadata | None:
        """
        Returns the name and consumer app id of a Workshop item, or None.
        Every failure is logged and collapses to None; nothing is raised to the caller.
        """
        try:
            body = await self._post_details_request(mod_id)
            details = decode_details(body)
        except NetworkError as e:
            logger.error(f"Request to Steam Workshop API for mod ID '{mod_id}' failed: {e.original_error!r}")
            return None
        except WorkshopException as e:
            logger.error(f"Failed to process Workshop API response for mod ID {mod_id}: {e}")
            return None

        try:
            return to_mod_metadata(details)
        except MissingField as e:
            # result != 1 means Steam could not resolve the item (9 = not found)
            logger.warning(f"{e} (mod {mod_id}, result={details.result})")
            return None

    async def _post_details_request(self, mod_id: int) -> str:
        kwargs = {"data": build_request_form(mod_id), "headers": FORM_HEADERS}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        try:
            async with self.session.post(STEAM_API_URL, **kwargs) as resp:
                if not 200 <= resp.status < 300:
                    raise APIError(mod_id, resp.status, "non-success status")
                try:
                    body = await resp.text()
                except UnicodeDecodeError as e:
                    raise MalformedResponse(f"undecodable body ({e})") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(f"Workshop API request failed for mod {mod_id}", original_error=e) from e

        if not body or not body.strip():
            raise APIError(mod_id, resp.status, "empty body")
        logger.debug(f"Workshop API answered for mod {mod_id} ({len(body)} bytes)")
        return body
