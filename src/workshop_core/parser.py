import json
from typing import Any

from .exceptions import DetailsNotFound, MalformedResponse, MissingField
from .models import ModMetadata, PublishedFileDetails


def build_request_form(mod_id: int) -> dict[str, str]:
    """Form body for a single-item GetPublishedFileDetails call."""
    return {"itemcount": "1", "publishedfileids[0]": str(mod_id)}


def _as_text(value: Any) -> str | None:
    # bool is an int subclass; Steam never sends one here
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (str, int)):
        return str(value)
    return None


def decode_details(body: str) -> PublishedFileDetails:
    """
    Decodes the first `publishedfiledetails` entry of a RemoteStorage response.
    Raises a WorkshopException subclass naming what was wrong with the body.
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise MalformedResponse(f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise MalformedResponse("top-level value is not an object")

    response = data.get("response")
    details = response.get("publishedfiledetails") if isinstance(response, dict) else None
    if not isinstance(details, list) or not details:
        raise DetailsNotFound()

    record = details[0]
    if not isinstance(record, dict):
        raise MalformedResponse("publishedfiledetails entry is not an object")

    name = record.get("name")

    result = record.get("result")
    return PublishedFileDetails(
        publishedfileid=_as_text(record.get("publishedfileid")),
        name=name if isinstance(name, str) else None,
        consumer_app_id=_as_text(record.get("consumer_app_id")),
        result=result if isinstance(result, int) and not isinstance(result, bool) else None,
    )


def to_mod_metadata(details: PublishedFileDetails) -> ModMetadata:
    if details.name is None:
        raise MissingField("name")
    if details.consumer_app_id is None:
        raise MissingField("consumer_app_id")
    return ModMetadata(name=details.name, consumer_app_id=details.consumer_app_id)
