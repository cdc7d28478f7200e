"""
Application layer.

Service facades composed from core logic and boundary adapters.
"""
