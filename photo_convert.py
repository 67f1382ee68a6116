"""CLI shim -- delegates to tiffconvert.cli.main().

Usage:
    python photo_convert.py ./scans --recursive
    python photo_convert.py https://drive.google.com/drive/folders/<ID> --credentials credentials.json
"""

from tiffconvert.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
