"""
Todo App: Command-Line Entry Point
==================================

Usage:
    python -m todoapp                      # guarded todo app on 127.0.0.1:3000
    python -m todoapp --demo hello         # unguarded hello-world demo
    python -m todoapp --host 0.0.0.0 --port 8080

Host and port default to SERVER_HOST / SERVER_PORT (see todoapp.config).
The process runs until it is terminated.
"""

import argparse
from typing import List, Optional

import uvicorn

from todoapp.config import settings
from todoapp.main import create_app, create_hello_app

DEMOS = {
    "todo": create_app,
    "hello": create_hello_app,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="todoapp",
        description="Serve the todo app (guarded) or the hello-world demo.",
    )
    parser.add_argument(
        "--demo",
        choices=sorted(DEMOS),
        default="todo",
        help="Which application to serve (default: todo)",
    )
    parser.add_argument("--host", default=settings.server_host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.server_port, help="Bind port")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    run_settings = settings.model_copy(
        update={"server_host": args.host, "server_port": args.port}
    )
    application = DEMOS[args.demo](run_settings)

    # Logging is configured by the app lifespan from LOG_FILTER
    uvicorn.run(
        application,
        host=run_settings.server_host,
        port=run_settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
