# flake8: noqa

from .form import (
    Form,
    FormCreate,
    FormCreated,
    FormDeleted,
    FormDetail,
    FormField,
    FormFieldCreate,
    FormInDB,
    FormInDBBase,
    FormList,
    FormSummary,
    FormUpdate,
    FormUpdated,
)
from .form_response import (
    FormResponse,
    FormResponseCreate,
    FormResponseDetail,
    FormResponseInDBBase,
    FormResponseList,
    FormResponseListItem,
    FormResponseSubmitted,
    ResponseDataItem,
    ResponseValue,
)
from .msg import ErrorResponse, HealthResponse
