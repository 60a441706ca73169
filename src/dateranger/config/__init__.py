"""Configuration — TOML discovery, settings merge, and logging setup."""
