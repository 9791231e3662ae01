import logging

from sqlalchemy.orm import Session

from formbuilder_core.app import crud, models, schemas  # noqa: F401
from formbuilder_core.app.config import settings
from formbuilder_core.db.base_class import Base

# make sure all SQL Alchemy models are imported (formbuilder_core.app.models) before
# initializing DB, otherwise relationships and foreign keys may not resolve

logger = logging.getLogger(__name__)


def init_db(db: Session) -> None:
    Base.metadata.create_all(bind=db.get_bind())
    if settings.SAMPLE_FORM_TITLE and crud.form.count(db) == 0:
        form_in = schemas.FormCreate(
            title=settings.SAMPLE_FORM_TITLE,
            description="Sample form created on first start",
            fields=[
                schemas.FormFieldCreate(label="Name", type="text", required=True),
                schemas.FormFieldCreate(label="Email", type="email", required=True),
                schemas.FormFieldCreate(
                    label="Topic",
                    type="select",
                    options=["Question", "Feedback", "Other"],
                ),
                schemas.FormFieldCreate(label="Message", type="textarea"),
            ],
        )
        form = crud.form.create_with_fields(db, obj_in=form_in)
        db.commit()
        logger.info(f"Created sample form id={form.id}")
