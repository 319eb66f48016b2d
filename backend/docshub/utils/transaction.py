from contextlib import contextmanager
from flask import current_app
from sqlalchemy.exc import IntegrityError
from docshub.extensions import db
from docshub.domain.invariants.exceptions import DomainError

@contextmanager
def transactional():
    """
    One unit of work: commit on success, roll back and re-raise on any error.

    Domain errors and unique-constraint violations are expected rejections and
    are left to the caller to report; anything else is logged with a traceback.
    """
    try:
        yield db.session
        db.session.commit()
    except (DomainError, IntegrityError):
        db.session.rollback()
        raise
    except Exception:
        db.session.rollback()
        current_app.logger.exception("Transaction rolled back")
        raise
