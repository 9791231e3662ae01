from typing import Dict, List, Optional, Union

from pydantic import BaseModel

from formbuilder_core.app.schemas.form import UTCDatetime

# JSON scalars a respondent may send
ResponseValue = Union[bool, int, float, str, None]


# Shared properties
class FormResponseBase(BaseModel):
    respondent_name: Optional[str] = None
    respondent_email: Optional[str] = None


# Properties to receive via API on creation
class FormResponseCreate(FormResponseBase):
    # Label -> value, kept in the order the client sent them
    responses: Dict[str, ResponseValue] = {}


class ResponseDataItem(BaseModel):
    field_label: str
    field_value: Optional[str] = None

    class Config:
        from_attributes = True


class FormResponseInDBBase(BaseModel):
    id: int
    form_id: int
    respondent_name: str
    respondent_email: Optional[str] = None
    submitted_at: UTCDatetime

    class Config:
        from_attributes = True


# Additional properties to return via API
class FormResponse(FormResponseInDBBase):
    form_title: Optional[str] = None
    response_data: List[ResponseDataItem] = []


class FormResponseListItem(BaseModel):
    response_id: int
    submitted_at: UTCDatetime
    respondent_name: str
    respondent_email: Optional[str] = None
    response_data: List[ResponseDataItem] = []


class FormResponseSubmitted(BaseModel):
    success: bool = True
    message: str = "Response submitted successfully"
    responseId: int
    response: FormResponseInDBBase


class FormResponseList(BaseModel):
    success: bool = True
    responses: List[FormResponseListItem]
    count: int


class FormResponseDetail(BaseModel):
    success: bool = True
    response: FormResponse
