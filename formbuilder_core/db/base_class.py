import re

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase, declared_attr

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    __allow_unmapped__ = True

    metadata = MetaData(naming_convention=NAMING_CONVENTION)

    # FormResponse -> form_responses
    @declared_attr
    def __tablename__(cls) -> str:
        return _CAMEL_BOUNDARY.sub("_", cls.__name__).lower() + "s"
