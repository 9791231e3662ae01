"""
Create the form builder tables, plus a sample form when SAMPLE_FORM_TITLE is
set and the database holds no forms yet.

Reads settings from the environment or a local .env file.
"""
import os.path
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

import logging

from dotenv import load_dotenv  # isort:skip

load_dotenv()  # isort:skip

from formbuilder_core.app.config import settings
from formbuilder_core.db.init_db import init_db
from formbuilder_core.db.session import SessionLocal

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    if settings.SAMPLE_FORM_TITLE:
        logger.info(f"Creating tables and sample form {settings.SAMPLE_FORM_TITLE!r}")
    else:
        logger.info("Creating tables (no sample form)")
    db = SessionLocal()
    try:
        init_db(db)
    finally:
        db.close()
    logger.info("Form builder database ready")


if __name__ == "__main__":
    main()
