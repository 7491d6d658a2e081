"""Island: resource visibility for a climbing social network."""

__version__ = "0.1.0"
