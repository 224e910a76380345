"""Configuration for the Zomato client.

Values are read from the environment once, at import time. A ``.env`` file
in the working directory (or any parent) is loaded first without overriding
variables that are already set.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

load_dotenv(dotenv_path=find_dotenv(usecwd=True))


# ============================================================================
# Server
# ============================================================================

# Default base server URL of the API
DEFAULT_BASE_URL: str = "https://developers.zomato.com/api"

# Versioned prefix prepended to every endpoint path
API_VERSION_PREFIX: str = "/v2.1"

# Default user agent sent with every request
DEFAULT_USER_AGENT: str = "zomato-client-python"

# Default per-call timeout in seconds
DEFAULT_TIMEOUT_SECONDS: float = 15.0

# Name of the header carrying the API key
AUTH_HEADER: str = "user-key"


# ============================================================================
# Environment overrides
# ============================================================================

BASE_URL: str = os.getenv("ZOMATO_BASE_URL", DEFAULT_BASE_URL)
USER_AGENT: str = os.getenv("ZOMATO_USER_AGENT", DEFAULT_USER_AGENT)
TIMEOUT_SECONDS: float = float(os.getenv("ZOMATO_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))


# ============================================================================
# API Keys
# ============================================================================

def get_api_key() -> Optional[str]:
    """Get the Zomato API key from ZOMATO_API_KEY, then ZOMATO_USER_KEY."""
    return os.getenv("ZOMATO_API_KEY") or os.getenv("ZOMATO_USER_KEY") or None
