"""Domain models and entities.

Why here:
- Pure, strict data structures live in this layer (Pydantic v2).
- The domain knows nothing about HTTP, the CLI, or storage: only accounts.
"""
