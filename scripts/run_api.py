#!/usr/bin/env python3
"""
Vault API launcher - opens the store and serves the command surface over HTTP
for the desktop shell.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from pocket_coffer.core import config
from pocket_coffer.core.dao import Store
from pocket_coffer.core.exceptions import StartupError
from pocket_coffer.api.main import create_app
from pocket_coffer.util.logging import logger


def main():
    parser = argparse.ArgumentParser(
        description="Serve the Pocket Coffer vault commands over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Serve on API_HOST:API_PORT
  %(prog)s --port 9000              # Serve on another port
  %(prog)s --data-dir ./data        # Keep the database somewhere else

Environment variables:
- POCKET_COFFER_DATA_DIR (default: per-user application data directory)
- POCKET_COFFER_DB_NAME (default: pocket_coffer.db)
- API_HOST / API_PORT (default: 127.0.0.1 / 8765)
- LOG_LEVEL (default: INFO), DEBUG=true enables /docs
        """
    )

    parser.add_argument("--host", default=config.API_HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=config.API_PORT, help="Port to bind")
    parser.add_argument("--data-dir", help="Data directory (overrides POCKET_COFFER_DATA_DIR)")

    args = parser.parse_args()

    logger.set_level("DEBUG" if config.debug_enabled() else config.LOG_LEVEL)
    logger.info("Application starting...")

    try:
        store = Store(data_dir=args.data_dir)
    except StartupError as e:
        print(f"ERROR: Vault startup failed: {e}")
        return 1

    try:
        uvicorn.run(create_app(store), host=args.host, port=args.port, log_level="info")
    except KeyboardInterrupt:
        print("\nVault API interrupted")
    finally:
        store.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
