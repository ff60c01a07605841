# backend/app/models/__init__.py
"""Pydantic models shared across the API."""
