"""Version information persisted alongside a new instance."""

APP_VERSION = "0.1.0"
DB_VERSION = 228
SYNC_VERSION = 34
