FAILED_TO_GET_ACCESS_TOKEN = "Failed to get access token"
FAILED_TO_SAVE_ACCESS_TOKEN = "Failed to save access token"
FAILED_TO_CLEAR_ACCESS_TOKEN = "Failed to clear access token"
FAILED_TO_GET_REFRESH_TOKEN = "Failed to get refresh token"
FAILED_TO_SAVE_REFRESH_TOKEN = "Failed to save refresh token"
FAILED_TO_CLEAR_REFRESH_TOKEN = "Failed to clear refresh token"
FAILED_TO_CLEAR_TOKENS = "Failed to clear tokens"
REFRESH_TOKEN_IS_MISSING = "Refresh token is missing"
FAILED_TO_EXTRACT_ACCESS_TOKEN = "Failed to extract access token"
RENEWAL_REJECTED = "Renewal request was rejected"
FAILED_TO_REFRESH_ACCESS_TOKEN = "Failed to refresh access token"
