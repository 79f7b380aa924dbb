"""
Configuration constants for the graph path service.

Every setting can be overridden through a PATHGRAPH_* environment variable.
"""

import os

# =============================================================================
# Server Configuration
# =============================================================================

HOST = os.environ.get("PATHGRAPH_HOST", "0.0.0.0")
PORT = int(os.environ.get("PATHGRAPH_PORT", "8000"))

# Auto-reload on code changes (local development only)
RELOAD = os.environ.get("PATHGRAPH_RELOAD", "").lower() in ("1", "true", "yes")

# Origins allowed to call the API from a browser frontend
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "PATHGRAPH_CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000",  # Vite, CRA/Next.js
    ).split(",")
    if origin.strip()
]

# =============================================================================
# Event Log Configuration
# =============================================================================

# Oldest events are dropped once the log grows past this size
EVENT_LOG_LIMIT = int(os.environ.get("PATHGRAPH_EVENT_LOG_LIMIT", "1000"))
