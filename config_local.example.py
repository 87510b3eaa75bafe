# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. This file should contain only safe overrides.
"""

# Example: browse someone else's fixture data locally
# CONSOLE_USER_ID = "alice"
# CONSOLE_USERNAME = "Alice"  # defaults to CONSOLE_USER_ID when omitted

# Example: point at a shared database file
# TASKS_DB_PATH = ".local/taskboard/shared.sqlite3"
