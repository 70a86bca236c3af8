import os

# Environment variables for configuration
HEALTH_API_REGION = os.environ.get("HEALTH_API_REGION", "us-east-1")
DEFAULT_LOOKBACK_DAYS = int(os.environ.get("DEFAULT_LOOKBACK_DAYS", "10"))
CSV_FILENAME_SUFFIX = os.environ.get("CSV_FILENAME_SUFFIX", "health")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
MAX_WORKERS = int(os.environ.get("MAX_WORKERS", "1"))

# Output formats
DATE_INPUT_FORMAT = "%Y-%m-%d"
WINDOW_DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
CSV_FILENAME_DATE_FORMAT = "%Y%m%d"

# Placeholders for missing optional fields
MISSING_ARN = "N/A"
MISSING_DESCRIPTION = "No description available"
MISSING_START_TIME = "Unknown time"
