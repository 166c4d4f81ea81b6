"""
Example configuration file for the Zoro scraper API
Copy this file to config.py and adjust the values.
Every value can also be overridden with an environment variable of the same name.
"""

# === Upstream Site ===
ZORO_BASE_URL = 'https://zoro.to'
REQUEST_TIMEOUT = 5  # Seconds, applies to connect and read

# === Server ===
API_HOST = '127.0.0.1'
API_PORT = 8000

# Reproduce the old wire behavior for non-2xx upstream responses:
# HTTP 200 with the literal body "Something went wrong!"
LEGACY_FALLBACK = False

# === Logging Configuration ===
LOG_LEVEL = 'INFO'  # Options: DEBUG, INFO, WARNING, ERROR, CRITICAL
API_LOG_FILE = ''  # e.g. 'logs/api.log'; empty disables file logging
