"""External dependency checking."""

import sys

from PIL import features


def check_external_dependencies() -> None:
    """Exit with install hints if Pillow cannot render TrueType fonts."""
    missing_deps: list[str] = []

    # Pillow wheels bundle FreeType, source builds may not
    if not features.check("freetype2"):
        missing_deps.append("freetype (Pillow built without FreeType support)")

    if missing_deps:
        print("ERROR: Required external dependencies are missing:", file=sys.stderr)
        for dep in missing_deps:
            print(f"  - {dep}", file=sys.stderr)
        print("\nInstallation instructions:", file=sys.stderr)
        print("  macOS: brew install freetype && pip install --force-reinstall Pillow", file=sys.stderr)
        print(
            "  Linux/Debian: sudo apt install libfreetype6-dev && pip install --force-reinstall Pillow",
            file=sys.stderr,
        )
        sys.exit(1)
