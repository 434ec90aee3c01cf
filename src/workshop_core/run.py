import asyncio
import sys

import aiohttp
from dotenv import load_dotenv

# Settings are read when workshop_core.config is imported
load_dotenv()

from workshop_core.config import REQUEST_TIMEOUT  # noqa: E402
from workshop_core.logging_config import get_logger, setup_logging  # noqa: E402
from workshop_core.models import ModMetadata  # noqa: E402
from workshop_core.workshop_api_manager import WorkshopAPIManager  # noqa: E402

logger = get_logger(__name__)


def parse_mod_ids(args: list[str]) -> list[int]:
    mod_ids = []
    for arg in args:
        if not arg.isdigit() or int(arg) <= 0:
            raise ValueError(f"Invalid Workshop mod ID: {arg!r}")
        mod_ids.append(int(arg))
    return mod_ids


def format_result(mod_id: int, metadata: ModMetadata | None) -> str:
    if metadata is None:
        return f"{mod_id}: not found"
    return f"{mod_id}: {metadata.name} (app {metadata.consumer_app_id})"


async def lookup(mod_ids: list[int]) -> list[ModMetadata | None]:
    timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        manager = WorkshopAPIManager(session)
        # One single-item request per id; they share nothing but the session
        return await asyncio.gather(*(manager.fetch_mod_metadata(mod_id) for mod_id in mod_ids))


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: python -m workshop_core.run <mod_id> [<mod_id> ...]")
        return 1

    try:
        mod_ids = parse_mod_ids(args)
    except ValueError as e:
        print(e)
        return 1

    setup_logging()
    logger.info(f"Looking up {len(mod_ids)} Workshop item(s)")

    results = asyncio.run(lookup(mod_ids))
    for mod_id, metadata in zip(mod_ids, results):
        print(format_result(mod_id, metadata))
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        # Handle Ctrl+C gracefully
        pass
