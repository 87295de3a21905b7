"""Global pytest configuration."""

import os

# Keep derivation logs quiet unless a test asks for them
os.environ.setdefault("LOG_LEVEL", "WARNING")
