"""Base services container for dependency injection."""

from typing import Optional

from config import Config
from exceptions import LoadError
from logger import get_logger
from storage.manager import StorageManager

logger = get_logger()


class Services:
    """Container for all application services.

    Each container owns its own expense store, so several independent
    ledgers can live in one process (tests rely on this).

    Args:
        config: Application configuration object.
        storage_manager: Optional storage manager for testing. If provided,
            config is not used to locate the document.
    """

    def __init__(self, config: Config, storage_manager=None):
        self.config = config
        self.storage_manager = storage_manager or StorageManager(config)

        # Lazy import to avoid circular dependencies
        from services.expenses import ExpenseService
        from services.persistence import PersistenceService

        self.expenses = ExpenseService()
        self.persistence = PersistenceService(self.storage_manager)

    def load_on_start(self) -> Optional[LoadError]:
        """Load saved expenses into the store.

        A missing document starts an empty ledger. A corrupt document also
        starts an empty ledger; the error is returned so the caller can tell
        the user their saved data was discarded.

        Returns:
            The LoadError if the document could not be read, otherwise None.
        """
        try:
            expenses = self.persistence.load()
        except LoadError as e:
            logger.debug(f"Error loading expenses, starting fresh: {e}")
            self.expenses.replace(e.expenses)
            return e

        self.expenses.replace(expenses)
        if expenses:
            logger.info(f"Loaded {len(expenses)} expenses.")
        else:
            logger.info("No saved expenses found. Starting fresh.")
        return None

    def save_on_exit(self) -> None:
        """Save the store.

        Raises:
            PersistError: If writing fails. The in-memory store is unchanged
                and still usable.
        """
        expenses = self.expenses.all()
        self.persistence.save(expenses)
        logger.info(f"Saved {len(expenses)} expenses.")
