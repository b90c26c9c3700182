"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about files, codecs or the CLI: only zoo concepts.
"""
