import logging
import sys
from datetime import datetime
from pathlib import Path

project_dir = Path(__file__).resolve().parent
if str(project_dir) not in sys.path:
    sys.path.insert(0, str(project_dir))

from ui.interaction_loop import InteractionLoop
from ui.key_reader import default_key_reader
from ui.styles import make_console


def _configure_logging(logs_dir: Path | None = None) -> logging.Logger:
    logger = logging.getLogger("ibgrade")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    # Avoid duplicate handlers (e.g. repeated main() calls in tests).
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logs_dir = logs_dir or Path.cwd() / "logs"
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        # stdout belongs to the interactive UI; only surface problems on stderr.
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.WARNING)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
        logger.warning("log_dir_unavailable path=%s", str(logs_dir))
        return logger

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = logs_dir / f"ibgrade_{timestamp}.log"

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.info("app_start")
    logger.info("log_file=%s", str(log_path))
    return logger


def main() -> int:
    logger = _configure_logging()
    # Stray bytes become U+FFFD and are reported as malformed input.
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")
    loop = InteractionLoop(
        console=make_console(),
        key_reader=default_key_reader(sys.stdin),
        stream=sys.stdin,
        logger=logger,
    )
    status = loop.run()
    logger.info("app_stop status=%s", status)
    return status


if __name__ == "__main__":
    sys.exit(main())
