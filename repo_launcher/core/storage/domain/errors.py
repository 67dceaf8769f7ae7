from sqlalchemy.exc import SQLAlchemyError

# What a key-value backend may raise on a read or write it cannot complete.
STORAGE_ERRORS = (SQLAlchemyError, OSError)
