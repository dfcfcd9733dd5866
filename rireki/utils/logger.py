"""
Logger setup for command-line runs.

Library code only emits through loguru (via the per-context logger modules);
sinks are configured here, once per run, by the CLI.

Each run gets its own directory under LOGS_PATH holding a DEBUG-level log file,
while the console shows INFO and above (DEBUG with --verbose).
"""

import platform
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from rireki import __version__
from rireki.utils.timestamp import now

# Console colors per level; INFO is left to the context
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(context_name: str, logs_path: Path) -> Path:
    """Per-run log directory, e.g. outs/logs/render_20251114_123456."""
    return logs_path / f"{context_name}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Replace loguru's default sink with a run log file and a console sink.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "render")
        log_dir: Directory for this run; created if missing
        extra_provenance: Additional key-value pairs for the provenance header
        level_colors: Console color overrides (e.g., {"INFO": "<cyan>"})
        console_level: Lowest level shown on the console

    Returns:
        Path to the log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=session_log_dir("render", Path("outs/logs")),
            extra_provenance={"Font": "HeiseiKakuGo-W5"},
        )
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in {**LEVEL_COLORS, **(level_colors or {})}.items():
        logger.level(level_name, color=color)

    # File keeps everything, including skipped entries and page placements
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log a header describing the run: command, versions, and any extra context.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"rireki: {__version__} | Python: {platform.python_version()} | {platform.system()}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
