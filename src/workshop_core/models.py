from dataclasses import dataclass


@dataclass(frozen=True)
class ModMetadata:
    name: str
    # Text, even though Steam exposes it as a numeric application id.
    consumer_app_id: str


@dataclass(frozen=True)
class PublishedFileDetails:
    """
    The subset of a `publishedfiledetails` entry we care about.
    Fields are optional; the decode never fails on a missing key.
    """

    publishedfileid: str | None = None
    name: str | None = None
    consumer_app_id: str | None = None
    result: int | None = None
