"""Material requirements planning over a local SQLite file."""
