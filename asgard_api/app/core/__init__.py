"""Configuration, logging and database bootstrap."""
