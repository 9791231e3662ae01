# flake8: noqa

from .form import Form, FormField
from .form_response import FormResponse, ResponseData
