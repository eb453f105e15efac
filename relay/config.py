# relay/config.py
"""Configuration constants for the License Lookup Relay HTTP layer.

Upstream registry settings (URLs, credentials, timeout) live in
lookup/config.py.
"""

import os

# =============================================================================
# API Version
# =============================================================================

API_VERSION = "1.0.0"

# =============================================================================
# Server
# =============================================================================

# Listen address for `main.py serve`
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

# =============================================================================
# Logging
# =============================================================================

RELAY_DEBUG = os.getenv("RELAY_DEBUG", "false").lower() in ("true", "1", "yes")

# One JSON object per log line instead of the console renderer
RELAY_LOG_JSON = os.getenv("RELAY_LOG_JSON", "false").lower() in ("true", "1", "yes")

# =============================================================================
# CORS
# =============================================================================

# CORS allowed origins (comma-separated string). Defaults to any origin.
# Example: "https://example.com,https://app.example.com"
_cors_origins = os.getenv("RELAY_CORS_ORIGINS", "*")
RELAY_CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins.split(",") if origin.strip()
]

# =============================================================================
# Proxy Configuration
# =============================================================================

# Trust X-Forwarded-For when logging the client IP.
# Set to "true" only when running behind a trusted reverse proxy.
TRUST_PROXY_HEADERS = os.getenv("RELAY_TRUST_PROXY_HEADERS", "false").lower() == "true"
