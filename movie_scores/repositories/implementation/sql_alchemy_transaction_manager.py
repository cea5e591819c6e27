import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from movie_scores.repositories.interface.transaction_manager import TransactionManager
from movie_scores.exceptions.repository import (
    IntegrityViolationException,
    TransientRepositoryException
)

logger = logging.getLogger(__name__)


class SQLAlchemyTransactionManager(TransactionManager):
    """Unit of work over a single session.

    Repositories sharing the session only flush. The commit happens once, when
    the ``transaction()`` block exits, and every exception (cancellation
    included) rolls back everything written inside the block.
    """

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def transaction(self):
        try:
            yield self.session
            self.session.commit()
        except OperationalError as e:
            self.session.rollback()
            logger.warning(f"Transaction rolled back after transient failure: {str(e)}")
            raise TransientRepositoryException(f"Transaction failed, retry the operation: {str(e)}") from e
        except IntegrityError as e:
            self.session.rollback()
            raise IntegrityViolationException(f"Transaction rejected by a constraint: {str(e)}") from e
        except BaseException:
            self.session.rollback()
            raise
