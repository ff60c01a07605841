# backend/app/services/__init__.py
"""Services package for the Zaryab content API."""
