"""SQLite repositories, one per table."""
