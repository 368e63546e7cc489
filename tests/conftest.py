import os
import tempfile

# keep the rotating log file out of the working tree during test runs
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="price-explorer-logs-"))
