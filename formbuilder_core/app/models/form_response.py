from typing import TYPE_CHECKING, List

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from formbuilder_core.db.base_class import Base
from formbuilder_core.utils.base import ANONYMOUS_RESPONDENT

if TYPE_CHECKING:
    from . import *  # noqa: F401, F403


class FormResponse(Base):
    id = Column(Integer, primary_key=True, index=True)
    form_id = Column(
        Integer, ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    form: "Form" = relationship("Form", back_populates="responses")  # type: ignore

    respondent_name = Column(String, nullable=False, default=ANONYMOUS_RESPONDENT)
    respondent_email = Column(String, nullable=True)
    submitted_at = Column(DateTime(timezone=True), nullable=False, index=True)

    response_data: List["ResponseData"] = relationship(  # type: ignore
        "ResponseData",
        back_populates="response",
        order_by="ResponseData.id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ResponseData(Base):
    __tablename__ = "response_data"

    id = Column(Integer, primary_key=True, index=True)
    response_id = Column(
        Integer,
        ForeignKey("form_responses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    response: "FormResponse" = relationship(  # type: ignore
        "FormResponse", back_populates="response_data"
    )

    # Matches FormField.label by value only
    field_label = Column(String, nullable=False)
    field_value = Column(Text, nullable=True)
