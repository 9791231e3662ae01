from typing import Any, List, Tuple

from sqlalchemy import delete, func
from sqlalchemy.orm import Session

from formbuilder_core.app.crud.base import CRUDBase
from formbuilder_core.app.models.form import Form, FormField
from formbuilder_core.app.models.form_response import FormResponse
from formbuilder_core.app.schemas.form import FormCreate, FormFieldCreate, FormUpdate
from formbuilder_core.utils.base import get_utc_now, join_options


class CRUDForm(CRUDBase[Form, FormCreate, FormUpdate]):
    def get_multi_with_response_count(
        self, db: Session, *, limit: Any = 10, offset: Any = 0
    ) -> List[Tuple[Form, int]]:
        # limit/offset arrive as raw query values; int() rejects junk here
        rows = (
            db.query(Form, func.count(FormResponse.id))
            .outerjoin(FormResponse, FormResponse.form_id == Form.id)
            .group_by(Form.id)
            .order_by(Form.created_at.desc(), Form.id.desc())
            .limit(int(limit))
            .offset(int(offset))
            .all()
        )
        return [(form, count) for form, count in rows]

    def get_fields(self, db: Session, *, form_id: int) -> List[FormField]:
        return (
            db.query(FormField)
            .filter(FormField.form_id == form_id)
            .order_by(FormField.field_order.asc())
            .all()
        )

    def create_with_fields(self, db: Session, *, obj_in: FormCreate) -> Form:
        utc_now = get_utc_now()
        db_obj = Form(
            title=obj_in.title,
            description=obj_in.description or "",
            created_at=utc_now,
            updated_at=utc_now,
        )
        db.add(db_obj)
        db.flush()
        self._insert_fields(db, form_id=db_obj.id, fields=obj_in.fields or [])
        return db_obj

    def update_with_fields(
        self, db: Session, *, db_obj: Form, obj_in: FormUpdate
    ) -> Form:
        db_obj.title = obj_in.title
        db_obj.description = obj_in.description or ""
        db_obj.updated_at = get_utc_now()
        db.flush()
        db.execute(delete(FormField).where(FormField.form_id == db_obj.id))
        self._insert_fields(db, form_id=db_obj.id, fields=obj_in.fields or [])
        return db_obj

    def _insert_fields(
        self, db: Session, *, form_id: int, fields: List[FormFieldCreate]
    ) -> None:
        for i, field in enumerate(fields):
            db.add(
                FormField(
                    form_id=form_id,
                    label=field.label,
                    type=field.type,
                    options=join_options(field.options),
                    required=field.required or False,
                    field_order=i,
                )
            )
        db.flush()


form = CRUDForm(Form)
