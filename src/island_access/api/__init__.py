"""HTTP API for the Island application."""
