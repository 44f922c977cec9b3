"""Configuration, database pool and logging setup."""
