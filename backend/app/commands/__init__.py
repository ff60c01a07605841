# backend/app/commands/__init__.py
"""
Command-line utilities for the Zaryab content API.

Commands:
    - seed_content: Load taxonomy terms and content items from a YAML fixture

Usage:
    python -m app.commands.seed_content fixtures/content.yml --reset
"""
