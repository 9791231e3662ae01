import logging

from fastapi import Depends

from formbuilder_core.app.data_broker import DataBroker
from formbuilder_core.app.form_service import FormService

_service_logger = logging.getLogger("formbuilder_core.app.form_service")


def get_data_broker() -> DataBroker:
    return DataBroker()


def get_form_service(broker: DataBroker = Depends(get_data_broker)) -> FormService:
    return FormService(broker, logger=_service_logger)
