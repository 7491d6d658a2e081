"""Core configuration, logging and shared exceptions."""
