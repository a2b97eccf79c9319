"""All magic values live here — no inline literals anywhere else."""

# Server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS = "*"
DEFAULT_CREDENTIALS_PATH = "./service-account.json"
MAX_PORT = 65535

# Route
ANALYZE_PATH = "/api/analyze"
IMAGE_FIELD = "image"
APP_TITLE = "Vision Gateway"

# Normalized contract
MAX_LABELS = 5
NO_TEXT_DETECTED = "No text detected in image."
CONFIDENCE_FORMAT = "{:.1f}%"

# Log / client-facing messages
MSG_SERVER_RUNNING = "Gateway Server running on http://%s:%d"
MSG_PROCESSING = "Processing multi-feature analysis..."
MSG_ANALYSIS_DONE = "Analysis done: %d labels, %d text chars, safety=%s"
MSG_ANALYSIS_ERROR = "Analysis error: %s"
MSG_CREDENTIALS_LOADED = "Loaded service account credentials from %s"
MSG_CREDENTIALS_DEFAULT = "No credentials file configured, using application default credentials"

# Error envelopes
ERR_NO_IMAGE = "No image uploaded"
ERR_ANALYSIS_FAILED = "Analysis failed"
ERR_EMPTY_PROVIDER_RESPONSE = "Provider returned no annotation result"
