"""Internal constants shared across the library."""

REST_PATH = "/rest/v1"
DEFAULT_TABLE = "stations"
DEFAULT_SCHEMA = "public"
USER_AGENT = "evconsole/0"

#: Cache key of the station collection query.
STATIONS_QUERY_KEY: tuple[str, ...] = ("stations",)

#: Ordering requested from the backend for list reads (newest first).
LIST_ORDER = "created_at.desc"

# PostgREST content negotiation for ``.single()`` style responses.
SINGLE_OBJECT_ACCEPT = "application/vnd.pgrst.object+json"
RETURN_REPRESENTATION = "return=representation"

# ------------------------------------------------------------------
# Station field vocabulary
# ------------------------------------------------------------------

KNOWN_CONNECTOR_TYPES: tuple[str, ...] = ("CCS", "CHAdeMO", "Tesla Supercharger", "Type 2")

#: Filter value that disables the status/connector predicate.
FILTER_ALL = "all"

DEFAULT_POWER_OUTPUT_KW = 50
DEFAULT_CONNECTOR_TYPE = "CCS"

# ------------------------------------------------------------------
# Screen text
# ------------------------------------------------------------------

LOADING_STATIONS_TEXT = "Loading stations..."
LOADING_MAP_TEXT = "Loading map..."
FETCH_ERROR_TITLE = "Error loading stations"
FETCH_ERROR_HINT = "Please try refreshing the page"
EMPTY_RESULT_TEXT = "No charging stations found matching your criteria."
