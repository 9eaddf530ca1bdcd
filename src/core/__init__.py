"""Core: domain models, capability contracts, configuration and logging."""
