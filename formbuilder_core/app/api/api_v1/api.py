from fastapi import APIRouter

from formbuilder_core.app.api.api_v1.endpoints import forms

api_router = APIRouter()
api_router.include_router(forms.router, prefix="/forms", tags=["forms"])
