import logging
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from formbuilder_core.app import crud, models, schemas
from formbuilder_core.app.data_broker import DataBroker
from formbuilder_core.utils.base import FormServiceError, NotFound, ValidationError


def _form_detail(form: models.Form, fields: List[models.FormField]) -> schemas.Form:
    return schemas.Form(
        **schemas.FormInDB.model_validate(form).model_dump(),
        fields=[schemas.FormField.model_validate(f) for f in fields],
    )


def _response_data(
    response: models.FormResponse,
) -> List[schemas.ResponseDataItem]:
    return [schemas.ResponseDataItem.model_validate(d) for d in response.response_data]


def check_title(title: Optional[str]) -> str:
    if not title or not title.strip():
        raise ValidationError("Form title is required")
    return title


class FormService(object):
    """
    Reads and writes forms, their fields and the responses submitted to them.

    Multi-row writes (create form, update form, submit response) each run in
    one transaction from `broker.transaction()`; any failure rolls the whole
    operation back. Store failures are re-raised as `FormServiceError`
    carrying the operation summary and the underlying message.
    """

    def __init__(
        self, broker: DataBroker, logger: Optional[logging.Logger] = None
    ) -> None:
        self.broker = broker
        self.logger = logger or logging.getLogger(__name__)

    ############ Forms ############

    def list_forms(self, *, limit: Any = 10, offset: Any = 0) -> List[schemas.FormSummary]:
        try:
            with self.broker.read_session() as db:
                rows = crud.form.get_multi_with_response_count(
                    db, limit=limit, offset=offset
                )
                return [
                    schemas.FormSummary(
                        **schemas.FormInDB.model_validate(form).model_dump(),
                        response_count=count,
                    )
                    for form, count in rows
                ]
        except (SQLAlchemyError, ValueError, TypeError) as e:
            raise FormServiceError("Failed to fetch forms", str(e)) from e

    def get_form(self, form_id: int) -> schemas.Form:
        try:
            with self.broker.read_session() as db:
                form = crud.form.get(db, id=form_id)
                if form is None:
                    raise NotFound("Form not found")
                return _form_detail(form, crud.form.get_fields(db, form_id=form_id))
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to fetch form", str(e)) from e

    def create_form(self, form_in: schemas.FormCreate) -> schemas.FormInDBBase:
        check_title(form_in.title)
        try:
            with self.broker.transaction() as db:
                form = crud.form.create_with_fields(db, obj_in=form_in)
                created = schemas.FormInDBBase.model_validate(form)
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to create form", str(e)) from e
        self.logger.info(
            f"Created form id={created.id} with {len(form_in.fields or [])} fields"
        )
        return created

    def update_form(
        self, form_id: int, form_in: schemas.FormUpdate
    ) -> schemas.FormInDB:
        check_title(form_in.title)
        try:
            with self.broker.transaction() as db:
                form = crud.form.get(db, id=form_id)
                if form is None:
                    raise NotFound("Form not found")
                form = crud.form.update_with_fields(db, db_obj=form, obj_in=form_in)
                updated = schemas.FormInDB.model_validate(form)
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to update form", str(e)) from e
        self.logger.info(
            f"Replaced form id={form_id} with {len(form_in.fields or [])} fields"
        )
        return updated

    def delete_form(self, form_id: int) -> int:
        try:
            with self.broker.transaction() as db:
                deleted_id = crud.form.remove(db, id=form_id)
                if deleted_id is None:
                    raise NotFound("Form not found")
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to delete form", str(e)) from e
        self.logger.info(f"Deleted form id={deleted_id}")
        return deleted_id

    ############ Responses ############

    def submit_response(
        self, form_id: int, response_in: schemas.FormResponseCreate
    ) -> schemas.FormResponseInDBBase:
        # NOTE: values are not checked against the form's declared fields
        try:
            with self.broker.transaction() as db:
                if crud.form.get(db, id=form_id) is None:
                    raise NotFound("Form not found")
                response = crud.form_response.create_with_data(
                    db, obj_in=response_in, form_id=form_id
                )
                submitted = schemas.FormResponseInDBBase.model_validate(response)
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to submit response", str(e)) from e
        self.logger.info(
            f"Stored response id={submitted.id} for form id={form_id} "
            f"with {len(response_in.responses)} values"
        )
        return submitted

    def list_responses(self, form_id: int) -> List[schemas.FormResponseListItem]:
        try:
            with self.broker.read_session() as db:
                return [
                    schemas.FormResponseListItem(
                        response_id=r.id,
                        submitted_at=r.submitted_at,
                        respondent_name=r.respondent_name,
                        respondent_email=r.respondent_email,
                        response_data=_response_data(r),
                    )
                    for r in crud.form_response.get_multi_by_form(db, form_id=form_id)
                ]
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to fetch responses", str(e)) from e

    def get_response(self, response_id: int) -> schemas.FormResponse:
        try:
            with self.broker.read_session() as db:
                row = crud.form_response.get_with_form_title(db, id=response_id)
                if row is None:
                    raise NotFound("Response not found")
                response, form_title = row
                return schemas.FormResponse(
                    **schemas.FormResponseInDBBase.model_validate(response).model_dump(),
                    form_title=form_title,
                    response_data=_response_data(response),
                )
        except SQLAlchemyError as e:
            raise FormServiceError("Failed to fetch response", str(e)) from e
