STEAM_API_URL = "https://api.steampowered.com/ISteamRemoteStorage/GetPublishedFileDetails/v1/"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
