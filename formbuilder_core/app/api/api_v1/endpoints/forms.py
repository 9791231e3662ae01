import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, status

from formbuilder_core.app import schemas
from formbuilder_core.app.api import deps
from formbuilder_core.app.form_service import FormService

logger = logging.getLogger(__name__)

router = APIRouter()


############ Forms ############


@router.get("", response_model=schemas.FormList)
@router.get("/", response_model=schemas.FormList, include_in_schema=False)
def get_forms(
    *,
    service: FormService = Depends(deps.get_form_service),
    # Passed through unparsed; a non-numeric value fails in the query
    limit: Optional[str] = "10",
    offset: Optional[str] = "0",
) -> Any:
    logger.info(f"Fetching all forms limit={limit} offset={offset}")
    forms = service.list_forms(limit=limit, offset=offset)
    logger.info(f"Successfully fetched {len(forms)} forms")
    return schemas.FormList(forms=forms, count=len(forms))


@router.get("/responses/{response_id}", response_model=schemas.FormResponseDetail)
def get_response(
    *,
    service: FormService = Depends(deps.get_form_service),
    response_id: int,
) -> Any:
    logger.info(f"Fetching single response id={response_id}")
    response = service.get_response(response_id)
    logger.info(f"Successfully fetched response id={response_id}")
    return schemas.FormResponseDetail(response=response)


@router.get("/{form_id}", response_model=schemas.FormDetail)
def get_form(
    *,
    service: FormService = Depends(deps.get_form_service),
    form_id: int,
) -> Any:
    logger.info(f"Fetching form id={form_id}")
    form = service.get_form(form_id)
    logger.info(f"Successfully fetched form id={form_id}")
    return schemas.FormDetail(form=form)


@router.post(
    "", response_model=schemas.FormCreated, status_code=status.HTTP_201_CREATED
)
@router.post(
    "/",
    response_model=schemas.FormCreated,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
def create_form(
    *,
    service: FormService = Depends(deps.get_form_service),
    form_in: schemas.FormCreate,
) -> Any:
    logger.info(f"Creating new form title={form_in.title!r}")
    form = service.create_form(form_in)
    logger.info(f"Successfully created form id={form.id}")
    return schemas.FormCreated(formId=form.id, form=form)


@router.put("/{form_id}", response_model=schemas.FormUpdated)
def update_form(
    *,
    service: FormService = Depends(deps.get_form_service),
    form_id: int,
    form_in: schemas.FormUpdate,
) -> Any:
    logger.info(f"Updating form id={form_id} title={form_in.title!r}")
    form = service.update_form(form_id, form_in)
    logger.info(f"Successfully updated form id={form_id}")
    return schemas.FormUpdated(form=form)


@router.delete("/{form_id}", response_model=schemas.FormDeleted)
def delete_form(
    *,
    service: FormService = Depends(deps.get_form_service),
    form_id: int,
) -> Any:
    logger.info(f"Deleting form id={form_id}")
    deleted_id = service.delete_form(form_id)
    logger.info(f"Successfully deleted form id={form_id}")
    return schemas.FormDeleted(deletedId=deleted_id)


############ Responses ############


@router.post(
    "/{form_id}/responses",
    response_model=schemas.FormResponseSubmitted,
    status_code=status.HTTP_201_CREATED,
)
def submit_response(
    *,
    service: FormService = Depends(deps.get_form_service),
    form_id: int,
    response_in: schemas.FormResponseCreate,
) -> Any:
    logger.info(
        f"Submitting response to form id={form_id} "
        f"respondent={response_in.respondent_name!r}"
    )
    response = service.submit_response(form_id, response_in)
    logger.info(f"Successfully submitted response id={response.id}")
    return schemas.FormResponseSubmitted(responseId=response.id, response=response)


@router.get("/{form_id}/responses", response_model=schemas.FormResponseList)
def get_responses(
    *,
    service: FormService = Depends(deps.get_form_service),
    form_id: int,
) -> Any:
    logger.info(f"Fetching all responses for form id={form_id}")
    responses = service.list_responses(form_id)
    logger.info(f"Successfully fetched {len(responses)} responses")
    return schemas.FormResponseList(responses=responses, count=len(responses))
