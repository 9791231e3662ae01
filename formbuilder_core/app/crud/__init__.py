# flake8: noqa

from .crud_form import form
from .crud_form_response import form_response
