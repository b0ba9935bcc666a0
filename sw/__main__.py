import sys
from sw.common.logger import log
from sw.ui.app import main

# Entry point for `python -m sw` and the `stopwatch` console script
def run() -> None:
    try:
        main()
    except SystemExit:
        raise
    except Exception:
        # Full stack trace, always
        log.exception("Uncaught exception in entrypoint, exiting")
        sys.exit(1)

if __name__ == "__main__":
    run()
