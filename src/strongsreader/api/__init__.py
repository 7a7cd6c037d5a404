"""HTTP API for tokenization and Strong's lookups."""
