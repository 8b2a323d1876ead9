import os
import sys

# Settings are read at import time; keep tests offline and deterministic.
os.environ["ANTHROPIC_API_KEY"] = ""
os.environ["AI_ANALYSIS_ENABLED"] = "false"
os.environ["CACHE_ENABLED"] = "false"

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
