#!/usr/bin/env python3
"""
Main entry point for the tinyirc client
"""

import sys

from tinyirc.logs import logger
from tinyirc.main import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted")
        sys.exit(0)
