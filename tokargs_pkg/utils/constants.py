# =====================================================================
# File: tokargs_pkg/utils/constants.py
# Program names, exit codes and parser policy names
# =====================================================================
from __future__ import annotations

PROG             = "tokargs"
CONFIG_FILENAME  = "tokargs.yml"
CONFIG_ENV       = "TOKARGS_CONFIG"

EXIT_OK          = 0
EXIT_FAILURE     = 1
EXIT_USAGE       = 2

# What happens to the arguments following a bare "--"
AFTER_DASH_STOP   = "stop"     # never surfaced, read them with Parser.rest()
AFTER_DASH_VALUES = "values"   # produced as Value tokens
AFTER_DASH_POLICIES = (AFTER_DASH_STOP, AFTER_DASH_VALUES)

# Option arities understood by OptionTable.fetch
FLAG = "flag"
ONE  = "one"
MANY = "many"
