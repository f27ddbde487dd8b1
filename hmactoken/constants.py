from __future__ import annotations

import logging

LOGGER = logging.getLogger("hmactoken")
APP_VERSION = "0.1.0"

DELIMITER = "."
TEXT_ENCODING = "utf-8"

SECRET_ENV_KEY = "HMACTOKEN_SECRET"
DEBUG_ENV_KEY = "HMACTOKEN_DEBUG"
