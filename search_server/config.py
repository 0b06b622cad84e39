# search_server/config.py

import os

# --- Base data paths ---
DATA_DIR = os.getenv("SEARCH_SERVER_DATA_DIR", "data")

# --- Sample corpus (id \t status \t ratings \t text) ---
CORPUS_PATH = os.path.join(DATA_DIR, "sample_docs.tsv")

# --- Profiling toggle (see profkit) ---
PROFILE_ENABLED = os.getenv("SEARCH_SERVER_PROFILE", "0") == "1"

# --- Ranking ---
MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

# --- Request log window (one request per minute over a day) ---
MINUTES_IN_DAY = 1440

# --- Display ---
DEFAULT_PAGE_SIZE = 2
