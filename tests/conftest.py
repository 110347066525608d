import os

# Settings are read at import time; give the test run a complete configuration.
os.environ.setdefault("DB_USER", "postgres")
os.environ.setdefault("DB_PASSWORD", "postgres")
os.environ.setdefault("DB_HOST", "localhost")
os.environ.setdefault("AUTH_JWT_SECRET", "test-secret")
os.environ.setdefault("STORAGE_ENDPOINT", "localhost:9000")
os.environ.setdefault("STORAGE_ACCESS_KEY", "minioadmin")
os.environ.setdefault("STORAGE_SECRET_KEY", "minioadmin")
os.environ.setdefault("STORAGE_SECURE", "false")
os.environ.setdefault("STORAGE_PUBLIC_URL", "https://files.example.com")
