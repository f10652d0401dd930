"""Global pytest configuration."""

import os

# Settings are read lazily; make sure app imports see a usable database URL
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
