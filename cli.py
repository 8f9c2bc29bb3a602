#!/usr/bin/env python3
"""
MMS API CLI.

Entry point for running the command-line client from a source checkout.
The installed console script `mms-api` calls the same function.

Usage:
    python cli.py --help
    python cli.py --json hosts
    python cli.py --cfg ./mms.conf alerts ack all
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from mms_api.cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
