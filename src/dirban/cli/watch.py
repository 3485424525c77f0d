"""Handler for 'dirban watch': headless live board snapshots."""

import asyncio
import json
import logging
import signal
import sys

from dirban.config import resolve_anchor
from dirban.sync import SyncRegistry

logger = logging.getLogger(__name__)


def _publisher(anchor):
    def publish(message: dict) -> None:
        line = json.dumps({"anchor": str(anchor), **message})
        sys.stdout.write(line + "\n")
        sys.stdout.flush()

    return publish


async def _watch(anchors) -> int:
    registry = SyncRegistry()
    stop = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    exit_code = 0
    try:
        for anchor in anchors:
            try:
                await registry.open(anchor, _publisher(anchor))
            except (OSError, UnicodeDecodeError) as exc:
                # Still watched; the next change may fix it
                logger.error("initial build of %s failed: %s", anchor, exc)
                exit_code = 1
        await stop.wait()
    finally:
        await registry.shutdown()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

    logger.info("stopped")
    return exit_code


def watch(args) -> int:
    """Watch one or more boards, printing a boardData JSON line per rebuild.

    SIGINT/SIGTERM stops cleanly.
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    anchors = [resolve_anchor(p) for p in (args.paths or [args.anchor])]
    return asyncio.run(_watch(anchors))
