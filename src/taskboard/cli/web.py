"""Handlers for 'taskboard web' command."""

import shutil
import sys
from pathlib import Path

from textual_serve.server import Server


def web(args) -> int:
    repo_path = str(Path(args.repo).resolve())

    taskboard = shutil.which("taskboard")
    if taskboard is None:
        print("error: taskboard not found on PATH", file=sys.stderr)
        return 1

    command = f"{taskboard} {repo_path}"
    server = Server(
        command,
        host=args.host,
        port=args.port,
        title="taskboard",
    )

    print(f"serving {repo_path} at http://{args.host}:{args.port}")
    server.serve()
    return 0
