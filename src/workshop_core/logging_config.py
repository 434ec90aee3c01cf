import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from colorama import Fore, Style
from colorama import init as colorama_init

from .config import LOG_DIR, LOG_LEVEL, STEAM_API_KEY


class SensitiveDataFilter(logging.Filter):
    """Filter to mask the Steam API key in logs."""

    def __init__(self, api_key: str = STEAM_API_KEY):
        super().__init__()
        self.api_key = api_key

    def filter(self, record):
        def mask(text):
            if isinstance(text, str) and self.api_key and self.api_key in text:
                text = text.replace(self.api_key, "***STEAM_API_KEY***")
            return text

        record.msg = mask(record.msg)

        if record.args:
            if isinstance(record.args, tuple):
                record.args = tuple(mask(arg) for arg in record.args)
            elif isinstance(record.args, dict):
                record.args = {k: mask(v) for k, v in record.args.items()}

        return True


def setup_logging(log_level: str = LOG_LEVEL, log_dir: str = LOG_DIR):
    # Force color if requested via environment variable (common in Docker)
    force_color = os.getenv("FORCE_COLOR", "").lower() in ("1", "true")
    colorama_init(autoreset=True, strip=False if force_color else None)

    # Remove existing handlers to ensure our configuration takes precedence
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    for f in root.filters[:]:
        if isinstance(f, SensitiveDataFilter):
            root.removeFilter(f)
    sensitive_filter = SensitiveDataFilter()
    root.addFilter(sensitive_filter)

    # Root at DEBUG; handlers filter as needed
    root.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(
            f"{Fore.CYAN}%(asctime)s{Style.RESET_ALL} | "
            f"{Fore.GREEN}%(levelname)s{Style.RESET_ALL}: "
            f"{Fore.YELLOW}%(name)s{Style.RESET_ALL} - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    # Logger filters do not run for records propagated from child loggers
    console_handler.addFilter(sensitive_filter)
    root.addHandler(console_handler)

    os.makedirs(log_dir, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "workshop.log"), maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s: %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    file_handler.addFilter(sensitive_filter)
    root.addHandler(file_handler)


def get_logger(name: str):
    return logging.getLogger(name)
