from __future__ import annotations

import argparse
import asyncio
import signal

from tracker_cli.config import load_config
from tracker_cli.runner import run_tracker


def main() -> None:
    parser = argparse.ArgumentParser(prog="tracker-cli", description="Simulated GPS tracker")
    parser.add_argument("--config", required=True, help="Path to YAML config")
    args = parser.parse_args()

    cfg = load_config(args.config)

    async def _main() -> None:
        stop = asyncio.Event()

        def _handle_stop(*_args) -> None:  # noqa: ANN001
            stop.set()

        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, _handle_stop)
            except NotImplementedError:
                pass

        task = asyncio.create_task(run_tracker(cfg))
        stopper = asyncio.create_task(stop.wait())
        await asyncio.wait({task, stopper}, return_when=asyncio.FIRST_COMPLETED)
        stopper.cancel()
        if task.done():
            # Surface errors from the run; max_reports reached otherwise.
            task.result()
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            return

    asyncio.run(_main())


if __name__ == "__main__":
    main()
