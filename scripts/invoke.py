#!/usr/bin/env python3
"""
Command-line host for the vault - invokes one named command against the local
store and prints the JSON result, or the error string on failure.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pocket_coffer.api.commands import CommandError, Commands
from pocket_coffer.core.dao import Store
from pocket_coffer.core.exceptions import StartupError


def main():
    parser = argparse.ArgumentParser(
        description="Invoke a vault command by name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list_passwords
  %(prog)s get_setting --payload '{"key": "theme"}'
  %(prog)s delete_document --payload '{"id": "doc-1"}'
  %(prog)s --list                   # Show available commands
        """
    )

    parser.add_argument("command", nargs="?", help="Command name")
    parser.add_argument("--payload", "-p", default=None, help="JSON object payload")
    parser.add_argument("--data-dir", help="Data directory (overrides POCKET_COFFER_DATA_DIR)")
    parser.add_argument("--list", "-l", action="store_true", help="List command names")

    args = parser.parse_args()

    if not args.list and not args.command:
        parser.error("command is required")

    payload = None
    if args.payload:
        try:
            payload = json.loads(args.payload)
        except json.JSONDecodeError as e:
            print(f"ERROR: payload is not valid JSON: {e}")
            return 2

    try:
        store = Store(data_dir=args.data_dir)
    except StartupError as e:
        print(f"ERROR: Vault startup failed: {e}")
        return 1

    with store:
        commands = Commands(store)
        if args.list:
            print("\n".join(commands.names))
            return 0

        try:
            result = commands.invoke(args.command, payload)
        except CommandError as e:
            print(f"ERROR: {e}")
            return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
