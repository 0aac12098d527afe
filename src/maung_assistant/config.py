"""Assistant configuration constants.

Centralizes magic numbers and user-facing strings for the session engine.
Runtime settings (backend URL, storage location) come from the environment,
see ``cli/providers.py``.
"""

# History configuration
HISTORY_LIMIT = 20  # Messages kept in the persisted record
HISTORY_KEY = "maung_ai_history"  # Storage key of the persisted record

# Request configuration
CONTEXT_WINDOW = 10  # Most recent messages sent along with each request
CHAT_ENDPOINT = "/ai/chat"

# Rendering configuration
DEFAULT_CODE_LANGUAGE = "sql"  # Language of fenced blocks without a tag

# Error messages surfaced to the presentation surface
GENERIC_ERROR_MESSAGE = "Something went wrong"
CONNECTION_ERROR_PREFIX = "Connection error: "
CLEAR_ERROR_PREFIX = "Could not delete saved history: "

# Fresh-session greeting
WELCOME_TITLE = "Sampurasun!"
WELCOME_TEXT = "Nepangkeun, abdi Si Maung. Bade naroskeun naon ngeunaan MaungDB?"
SUGGESTED_QUESTIONS = (
    "Kumaha carana ngadamel tabel?",
    "Bikeun conto insert data",
    "Jelaskeun syntax TINGALI",
)
