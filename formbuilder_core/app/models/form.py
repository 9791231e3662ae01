from typing import TYPE_CHECKING, List

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship

from formbuilder_core.db.base_class import Base
from formbuilder_core.utils.base import FieldType

if TYPE_CHECKING:
    from . import *  # noqa: F401, F403

_FIELD_TYPES_SQL = ", ".join(f"'{t.value}'" for t in FieldType)


class Form(Base):
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    form_fields: List["FormField"] = relationship(  # type: ignore
        "FormField",
        back_populates="form",
        order_by="FormField.field_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    responses: List["FormResponse"] = relationship(  # type: ignore
        "FormResponse",
        back_populates="form",
        order_by="FormResponse.submitted_at.desc()",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class FormField(Base):
    __table_args__ = (
        CheckConstraint(f"type IN ({_FIELD_TYPES_SQL})", name="type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    form_id = Column(
        Integer, ForeignKey("forms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    form: "Form" = relationship("Form", back_populates="form_fields")  # type: ignore

    label = Column(String, nullable=False)
    type = Column(String, nullable=False)
    # Comma-joined choices, "" when the field has none
    options = Column(Text, nullable=False, default="")
    required = Column(Boolean, nullable=False, default=False)
    field_order = Column(Integer, nullable=False)
