# =====================================================================
# File: core/__init__.py
# Description: Core package initializer for tokargs
# =====================================================================

"""
Core components of tokargs:
  - Token and outcome types
  - Parser (tokenizer/cursor state machine)
  - Error taxonomy and messages
  - Option tables and dispatch
  - Value coercion
  - Configuration
  - Greeter front end (args + app)
"""
