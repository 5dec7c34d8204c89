# =====================================================================
# File: tokargs_pkg/__main__.py
# Entrypoint for tokargs package (python -m tokargs_pkg)
# =====================================================================
from .core.app import main

if __name__ == "__main__":
    raise SystemExit(main())
