# =====================================================================
# File: utils/__init__.py
# Description: Utilities package initializer for tokargs
# =====================================================================

"""
Utility helpers for tokargs:
  - Leveled logging for the command-line front end
  - Configuration file discovery
  - Shared constants (exit codes, policy names, arities)
"""
