from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from formbuilder_core.app.crud.base import CRUDBase
from formbuilder_core.app.models.form import Form
from formbuilder_core.app.models.form_response import FormResponse, ResponseData
from formbuilder_core.app.schemas.form_response import (
    FormResponseCreate,
    ResponseValue,
)
from formbuilder_core.utils.base import ANONYMOUS_RESPONDENT, get_utc_now


def encode_response_value(value: ResponseValue) -> Optional[str]:
    # Stored as text; booleans use their JSON spelling
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    # JSON numbers have one type: 1.0 is stored as "1"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


class CRUDFormResponse(CRUDBase[FormResponse, FormResponseCreate, FormResponseCreate]):
    def create_with_data(
        self,
        db: Session,
        *,
        obj_in: FormResponseCreate,
        form_id: int,
    ) -> FormResponse:
        db_obj = FormResponse(
            form_id=form_id,
            respondent_name=obj_in.respondent_name or ANONYMOUS_RESPONDENT,
            respondent_email=obj_in.respondent_email or None,
            submitted_at=get_utc_now(),
        )
        db.add(db_obj)
        db.flush()
        for field_label, field_value in obj_in.responses.items():
            db.add(
                ResponseData(
                    response_id=db_obj.id,
                    field_label=field_label,
                    field_value=encode_response_value(field_value),
                )
            )
        db.flush()
        return db_obj

    def get_multi_by_form(self, db: Session, *, form_id: int) -> List[FormResponse]:
        return (
            db.query(FormResponse)
            .options(selectinload(FormResponse.response_data))
            .filter(FormResponse.form_id == form_id)
            .order_by(FormResponse.submitted_at.desc(), FormResponse.id.desc())
            .all()
        )

    def get_with_form_title(
        self, db: Session, *, id: int
    ) -> Optional[Tuple[FormResponse, Optional[str]]]:
        row = (
            db.query(FormResponse, Form.title)
            .options(selectinload(FormResponse.response_data))
            .outerjoin(Form, FormResponse.form_id == Form.id)
            .filter(FormResponse.id == id)
            .first()
        )
        if row is None:
            return None
        return row[0], row[1]


form_response = CRUDFormResponse(FormResponse)
