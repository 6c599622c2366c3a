"""
PyInstaller entry point stub for colortty.

This stub script allows PyInstaller to properly bundle the colortty package
while preserving its relative imports.
"""

if __name__ == "__main__":
    import sys

    from colortty.main import main

    sys.exit(main())
