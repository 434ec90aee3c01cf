# core package for Steam Workshop metadata lookups
# no workshop_api_manager import: it reads config, which entry points populate from .env first
from . import parser
from .models import ModMetadata

__all__ = ["ModMetadata", "parser"]
