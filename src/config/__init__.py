"""Configuration constants, models and record schemas."""
