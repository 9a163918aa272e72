"""
TokPulse - Main Entry Point

Example usage: fetch one public TikTok post and print its metadata.

    python main.py download https://www.tiktok.com/@user/video/1234567890
"""

import sys

from tokpulse.cli import main

if __name__ == "__main__":
    sys.exit(main())
