import logging
import os
import sys
from pathlib import Path

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: Rules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.
    Exits the process on failure (fail fast).
    """
    ops = rules.ops

    # 1. Check Data Dir (holds the SQLite ledger database)
    if ops.data_dir_required:
        data_dir.mkdir(parents=True, exist_ok=True)
        if not os.access(data_dir, os.W_OK):
            logger.critical(f"Data directory {data_dir} is not writable")
            sys.exit(1)

    # 2. Check Required Env
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        logger.critical(f"Missing required environment variables: {', '.join(missing)}")
        sys.exit(1)

    logger.info("Configuration validated.")
