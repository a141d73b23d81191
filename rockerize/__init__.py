"""Build a minimal container image for a local Rust application and run it."""

__version__ = "0.1.0"
