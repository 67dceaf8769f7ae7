# File: repo_launcher/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Storage models inherit from this.
Base = declarative_base()
