"""Grid Simulator - Entry Point."""

import argparse
import sys

from config import load_config
from internal.logging import StructuredLogger, level_from_name


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="grid-simulator", description="Single object grid movement simulator")
    parser.add_argument("--config", default=None, help="JSON config file (defaults to config.json)")
    subparsers = parser.add_subparsers(dest="cmd")

    p_console = subparsers.add_parser("console", help="Read setup and commands from stdin (default)")
    p_console.add_argument("--no-captions", action="store_true", help="Do not print input prompts")

    p_serve = subparsers.add_parser("serve", help="Serve the HTTP API")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    config = load_config(args.config)

    if args.cmd == "serve":
        import uvicorn
        from ui.app import create_app

        uvicorn.run(create_app(config), host=args.host or config.server.host, port=args.port or config.server.port)
        return 0

    from ui.console import ConsoleSession

    StructuredLogger.configure(min_level=level_from_name(config.log_level_name))
    print_captions = config.console.print_captions and not getattr(args, "no_captions", False)
    ConsoleSession(print_captions=print_captions).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
