import os
from dotenv import load_dotenv

load_dotenv()

ENGINE_VERSION = "1.0.0"

LOG_LEVEL = os.getenv("YOUTHMATCH_LOG_LEVEL", "INFO").upper()

# Drop validator-flagged programs before ranking in the HTTP layer.
# Ranking itself never consults the validator.
HIDE_FLAGGED = os.getenv("YOUTHMATCH_HIDE_FLAGGED", "false").strip().lower() in ("1", "true", "yes")

MAX_PROGRAMS_PER_REQUEST = int(os.getenv("YOUTHMATCH_MAX_PROGRAMS", "500"))
