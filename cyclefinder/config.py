# cyclefinder/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# ---- Search -----------------------------------------------------------------
WORKERS         = int(os.getenv("CYCLEFINDER_WORKERS", 1))         # threads for per-source runs
_deadline       = os.getenv("CYCLEFINDER_DEADLINE")
DEADLINE        = float(_deadline) if _deadline else None          # seconds, None = unlimited
STRICT_EDGES    = os.getenv("CYCLEFINDER_STRICT_EDGES", "False").lower() == "true"

# ---- Output -----------------------------------------------------------------
LOG_LEVEL       = os.getenv("LOG_LEVEL", "INFO")
