"""Configuration, logging, errors and operation results."""
