"""Configuration, logging, database access and shared primitives."""
