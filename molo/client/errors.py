"""
Short messages shown to the diary owner.

The backend's own error text is never surfaced; only the operation and the
HTTP status decide what the user reads.
"""
from typing import Optional

NETWORK_ERROR = "Network error"
NO_TOKEN = "No token available"
SESSION_EXPIRED = "Session expired, please log in again"
INVALID_PIN = "Invalid PIN"
NOT_FOUND = "Diary not found"

FAILURE_MESSAGES = {
    "check_init_status": "Failed to check init status",
    "initialize": "Initialization failed",
    "login": "Login failed",
    "list_diaries": "Failed to load diaries",
    "get_diary": "Failed to load diary",
    "save_diary": "Failed to save",
    "delete_diary": "Failed to delete",
}

PUBLIC_OPERATIONS = ("check_init_status", "initialize", "login")


def user_message(operation: str, status_code: Optional[int] = None) -> str:
    """Pick the message for a failed call; no status means the request never completed"""
    if status_code is None:
        return NETWORK_ERROR
    if status_code == 401:
        return INVALID_PIN if operation in PUBLIC_OPERATIONS else SESSION_EXPIRED
    if status_code == 404 and operation not in PUBLIC_OPERATIONS:
        return NOT_FOUND
    return FAILURE_MESSAGES.get(operation, "Something went wrong")
