"""
DexStitch layout — entry point.

Usage:
    python -m dexstitch serve                  # layout API on 127.0.0.1:8000
    python -m dexstitch serve --port 3000
    python -m dexstitch serve --host 0.0.0.0 --log-level debug
"""

import logging
import sys


USAGE = ("Usage: python -m dexstitch serve "
         "[--host HOST] [--port PORT] [--log-level LEVEL]")


def main():
    args = sys.argv[1:]
    cmd = args[0] if args else "serve"

    if cmd == "serve":
        port = 8000
        host = "127.0.0.1"
        level = "info"
        for i, a in enumerate(args):
            if a == "--port" and i + 1 < len(args):
                port = int(args[i + 1])
            elif a == "--host" and i + 1 < len(args):
                host = args[i + 1]
            elif a == "--log-level" and i + 1 < len(args):
                level = args[i + 1]

        # Placement and drop lines come from dexstitch.layout.engine.
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        from dexstitch.web.server import main as serve
        serve(host=host, port=port)
    elif cmd in ("-h", "--help", "help"):
        print("DexStitch layout server: nests pattern pieces on a fabric roll.")
        print(USAGE)
    else:
        print(f"Unknown command: {cmd}")
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    main()
