"""Runtime configuration for the Pet Gadget Insider content service.

Values are plain module constants; the ``PGI_*`` environment variables
override them at import time.
"""

import os
from pathlib import Path

SITE_URL = os.environ.get("PGI_SITE_URL", "https://petgadgetinsider.org").rstrip("/")
SITE_NAME = "Pet Gadget Insider"

_DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "blog-articles.json"
DATA_PATH = Path(os.environ.get("PGI_DATA_PATH", str(_DEFAULT_DATA_PATH)))

LOG_LEVEL = os.environ.get("PGI_LOG_LEVEL", "INFO").upper()
