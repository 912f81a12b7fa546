"""
Pytest fixtures for integration tests.

Integration tests run the cache repositories against a real SQLite file.
"""

# Import the SQLite fixtures from the shared location
from tests.shared.database import async_engine, session_maker

# Make fixtures available
__all__ = ["async_engine", "session_maker"]
