import datetime
from typing import Annotated, Any, List, Optional, Union

from pydantic import AfterValidator, BaseModel, field_validator

from formbuilder_core.utils.base import ensure_utc, split_options

UTCDatetime = Annotated[datetime.datetime, AfterValidator(ensure_utc)]


# Shared properties
class FormBase(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class FormFieldCreate(BaseModel):
    label: Optional[str] = None
    type: Optional[str] = None
    # Either a list of choices or an already comma-joined string
    options: Optional[Union[List[str], str]] = None
    required: Optional[bool] = None


# Properties to receive via API on creation
class FormCreate(FormBase):
    fields: Optional[List[FormFieldCreate]] = None


# Properties to receive via API on update. The field list replaces the
# stored one entirely.
class FormUpdate(FormCreate):
    pass


class FormField(BaseModel):
    id: int
    label: str
    type: str
    options: List[str]
    required: bool
    field_order: int

    @field_validator("options", mode="before")
    @classmethod
    def _split_options(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return split_options(v)
        return v

    class Config:
        from_attributes = True


class FormInDBBase(BaseModel):
    id: int
    title: str
    description: str
    created_at: UTCDatetime

    class Config:
        from_attributes = True


class FormInDB(FormInDBBase):
    updated_at: UTCDatetime


# Additional properties to return via API
class Form(FormInDB):
    fields: List[FormField] = []


class FormSummary(FormInDB):
    response_count: int = 0


class FormList(BaseModel):
    success: bool = True
    forms: List[FormSummary]
    count: int


class FormDetail(BaseModel):
    success: bool = True
    form: Form


class FormCreated(BaseModel):
    success: bool = True
    message: str = "Form created successfully"
    formId: int
    form: FormInDBBase


class FormUpdated(BaseModel):
    success: bool = True
    message: str = "Form updated successfully"
    form: FormInDB


class FormDeleted(BaseModel):
    success: bool = True
    message: str = "Form deleted successfully"
    deletedId: int
