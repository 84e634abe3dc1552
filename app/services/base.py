import logging
from sqlalchemy.orm import Session


class BaseService:
    """Common plumbing for domain services: a session, a logger and safe commits."""

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(self.__class__.__module__)

    def commit(self):
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            self.log_error(f"{self.__class__.__name__} commit failed: {e}")
            raise

    def log_info(self, message: str, **extra):
        self._logger.info(message, extra=extra or None)

    def log_warning(self, message: str, **extra):
        self._logger.warning(message, extra=extra or None)

    def log_error(self, message: str, **extra):
        self._logger.error(message, extra=extra or None)
