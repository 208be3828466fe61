"""Internal constants shared across the library."""

BASE_URL = "http://localhost:3000"
COLLECTION_PATH = "/cars"
USER_AGENT = "carinventory-python"
DEFAULT_REQUEST_TIMEOUT: float = 30.0

# Expected status codes for each endpoint.
STATUS_LIST_OK = 200
STATUS_CREATED = 201
STATUS_DELETED = 204

# Path segment used for the bulk delete endpoint.
DELETE_ALL_SEGMENT = "all"

# Fallback text when an error response carries no readable body.
UNKNOWN_ERROR_BODY = "Unknown error"

# Bounds used by form validation.
MIN_CAR_YEAR = 1900
