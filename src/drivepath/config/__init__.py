"""Configuration loading and derived settings for drivepath."""
