import os
import tempfile

# Keep logs and prefs written during tests out of the real user data directory.
os.environ.setdefault("PMT_DATA_DIR", tempfile.mkdtemp(prefix="pmt_tests_"))
