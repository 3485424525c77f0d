"""Handler for 'dirban web': serve the board UI in a browser."""

import shlex
import shutil
import sys

from textual_serve.server import Server

from dirban.cli._common import anchor_path


def web(args) -> int:
    anchor = anchor_path(args)

    dirban = shutil.which("dirban")
    if dirban is None:
        print("error: dirban not found on PATH", file=sys.stderr)
        return 1

    command = f"{shlex.quote(dirban)} {shlex.quote(str(anchor))}"
    server = Server(command, host=args.host, port=args.port, title=f"dirban: {anchor.parent.name}")

    print(f"serving {anchor.parent} at http://{args.host}:{args.port}")
    server.serve()
    return 0
