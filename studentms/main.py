"""
Entry point of the console application.

Run with ``studentms`` (console script) or ``python -m studentms.main``.
"""

import logging
import sys
from typing import Optional

from studentms.cli.menu import Menu
from studentms.cli.prompts import Prompter
from studentms.core.config import Settings, settings
from studentms.core.database import build_engine
from studentms.core.exceptions import StoreBootstrapError
from studentms.core.logging import setup_logging
from studentms.services.cache import DataStore
from studentms.services.store.loader import init_and_seed
from studentms.services.sync import RecordService

logger = logging.getLogger(__name__)

BOOTSTRAP_MESSAGES = {
    "open": "Could not open database.",
    "init": "Could not initialize database.",
}


def main(
    config: Optional[Settings] = None,
    prompter: Optional[Prompter] = None,
) -> int:
    """
    Open the store, load the cache and run the menu.

    Returns the process exit status: 0 after a normal exit, 1 if the store
    cannot be opened or initialized.
    """
    config = config or settings
    prompter = prompter or Prompter()
    setup_logging(config.LOG_LEVEL)

    try:
        engine = build_engine(config.DATABASE_URL, echo=config.DB_ECHO_SQL)
    except StoreBootstrapError as e:
        logger.critical(f"{e.code}: {e.message}")
        prompter.say(BOOTSTRAP_MESSAGES["open"])
        return 1

    try:
        try:
            db = init_and_seed(engine, seed=config.SEED_ON_FIRST_RUN)
        except StoreBootstrapError as e:
            logger.critical(f"{e.code}: {e.message}")
            prompter.say(BOOTSTRAP_MESSAGES.get(e.stage, BOOTSTRAP_MESSAGES["init"]))
            return 1

        try:
            service = RecordService(db, DataStore())
            if not service.reload():
                prompter.say(BOOTSTRAP_MESSAGES["init"])
                return 1
            Menu(service, prompter, title=config.PROJECT_NAME).run()
        finally:
            # Always close the store before exiting
            db.close()
    finally:
        engine.dispose()

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
