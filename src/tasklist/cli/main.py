# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the store, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import asyncio
import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import Settings, get_settings
from ..connectors.console_connector import emit, run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStoreError

logger = logging.getLogger(__name__)


async def _run(settings: Settings) -> int:
    try:
        state = await create_initial_state(settings=settings, notify=emit)
    except TaskStoreError as e:
        logger.error("Cannot start: %s", e)
        return 1

    try:
        await run_console_loop(state)
    finally:
        await shutdown(state)
    return 0


def main() -> int:
    settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    code = asyncio.run(_run(settings))
    logger.info("Bye.")
    return code


if __name__ == "__main__":
    raise SystemExit(main())
