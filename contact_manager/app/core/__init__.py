"""Configuration, logging, persistence and web plumbing."""
