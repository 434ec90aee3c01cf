from .constants import FORM_CONTENT_TYPE

HEADERS = {
    "User-Agent": "WorkshopCore/1.0 (+https://steamcommunity.com/workshop/)",
    "Accept": "application/json",
}

FORM_HEADERS = {**HEADERS, "Content-Type": FORM_CONTENT_TYPE}
