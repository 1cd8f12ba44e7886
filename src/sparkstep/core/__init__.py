"""Core primitives: configuration and the error hierarchy."""
