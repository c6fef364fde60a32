# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env`. Only the switches below are read from this file.
"""

# Example: start with empty Backlog / This Week / Today columns
# SEED_DEMO = False

# Example: disable the console REPL
# CONSOLE_ENABLED = False
