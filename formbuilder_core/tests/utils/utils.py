import random
import string
from typing import Any, Dict, List, Optional

from formbuilder_core.app import schemas
from formbuilder_core.app.form_service import FormService


def random_lower_string(k: int = 16) -> str:
    return "".join(random.choices(string.ascii_lowercase, k=k))


def random_title() -> str:
    return f"Form {random_lower_string(8)}"


def sample_fields() -> List[Dict[str, Any]]:
    return [
        {"label": "Name", "type": "text", "required": True},
        {"label": "Email", "type": "email"},
        {
            "label": "Color",
            "type": "select",
            "options": ["Red", "Blue", "Green"],
            "required": True,
        },
        {"label": "Size", "type": "radio", "options": "S,M,L"},
        {"label": "Subscribe", "type": "checkbox"},
    ]


def create_random_form(
    service: FormService, *, fields: Optional[List[Dict[str, Any]]] = None
) -> schemas.FormInDBBase:
    return service.create_form(
        schemas.FormCreate(
            title=random_title(),
            description=random_lower_string(),
            fields=fields if fields is not None else sample_fields(),
        )
    )
