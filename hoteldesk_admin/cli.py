"""
HotelDesk Admin - Script Scaffolding

Shared plumbing for the admin scripts: logging setup, report headers and
the run wrapper that opens the store and maps failures to exit codes.

Author: HotelDesk Project
"""

import sys
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from hoteldesk_admin.exceptions import HotelDeskError, NotFoundError
from hoteldesk_admin.managers import ConfigManager, DatabaseManager


# Exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

LOG_FILE_PREFIX = "hoteldesk-admin"


def setup_script_logging(config_manager: ConfigManager, script_name: str) -> Optional[Path]:
    """
    Setup logging for a script run.

    Console output always; when log_to_file is set, also a timestamped
    file hoteldesk-admin-<script>-YYYY-MM-DD-HH-MM-SS.log in a "logs"
    folder next to the config file.

    Args:
        config_manager: ConfigManager instance for log settings
        script_name: Script name used in the log filename

    Returns:
        Path to the log file, or None when file logging is off
    """
    log_level = config_manager.get("log_level", "INFO")

    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = None

    if config_manager.get("log_to_file", True):
        log_dir = config_manager.config_file.parent / "logs"
        log_dir.mkdir(exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
        log_file = log_dir / f"{LOG_FILE_PREFIX}-{script_name}-{timestamp}.log"
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    logger = logging.getLogger(__name__)
    if log_file:
        logger.debug(f"Log file: {log_file}")

    return log_file


def cleanup_old_logs(config_manager: ConfigManager, current_log: Optional[Path]) -> int:
    """
    Prune script logs past log_retention_days.

    Only files named like this package's logs are considered, and the
    log of the current run is always kept.

    Args:
        config_manager: Source of log_retention_days
        current_log: Log file of this run, or None when file logging is off

    Returns:
        Number of files removed
    """
    logger = logging.getLogger(__name__)
    retention_days = config_manager.get("log_retention_days", 30)
    if current_log is None or retention_days <= 0:
        return 0

    cutoff = (datetime.now() - timedelta(days=retention_days)).timestamp()
    stale = [
        path for path in current_log.parent.glob(f"{LOG_FILE_PREFIX}-*.log")
        if path != current_log and path.stat().st_mtime < cutoff
    ]

    removed = 0
    for path in stale:
        try:
            path.unlink()
            removed += 1
        except OSError as e:
            logger.warning(f"Could not remove expired log {path.name}: {e}")

    if removed:
        logger.info(f"Removed {removed} log file(s) older than {retention_days} days")
    return removed


def print_header(title: str):
    """Print script header"""
    print("=" * 70)
    print(f"HotelDesk Admin - {title}")
    print("=" * 70)
    print()


def print_section(title: str):
    """Print section header"""
    print()
    print("-" * 70)
    print(f"  {title}")
    print("-" * 70)


def print_next_steps(*steps: str):
    """Print numbered follow-up steps for the operator"""
    print()
    print("Next steps:")
    for number, step in enumerate(steps, start=1):
        print(f"{number}. {step}")


def run_script(script_name: str, body: Callable, *args) -> int:
    """
    Run a script body against the configured document store.

    Process:
    1. Load configuration
    2. Setup logging and prune old log files
    3. Open the database and create missing collections
    4. Call body(db_manager, session, config_manager, *args)
    5. Map errors to exit codes

    Args:
        script_name: Name used for logging
        body: Script body returning an exit code
        *args: Extra arguments passed through to the body

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    config_mgr = ConfigManager()
    try:
        config_mgr.load_config()
    except HotelDeskError as e:
        print(f"[ERROR] {e}")
        return EXIT_FAILURE
    log_file = setup_script_logging(config_mgr, script_name)
    cleanup_old_logs(config_mgr, log_file)
    logger = logging.getLogger(__name__)

    db_manager = DatabaseManager(config_mgr.get_database_path())
    session = None

    try:
        db_manager.InitializeDatabase()
        session = db_manager.GetSession()
        return body(db_manager, session, config_mgr, *args)

    except NotFoundError as e:
        print(f"[ERROR] {e}")
        logger.error(f"{script_name}: {e}")
        return EXIT_FAILURE
    except HotelDeskError as e:
        print(f"[ERROR] {e}")
        logger.error(f"{script_name} failed: {e}")
        return EXIT_FAILURE
    except SQLAlchemyError as e:
        print(f"[ERROR] Document store error: {e}")
        logger.error(f"{script_name} failed with a store error: {e}")
        return EXIT_FAILURE
    except Exception as e:
        print(f"[ERROR] {e}")
        logger.exception(f"Unexpected error in {script_name}")
        return EXIT_FAILURE
    finally:
        if session is not None:
            session.close()
        db_manager.Dispose()
