"""Gemeinsame Basis für API-Schemas (camelCase im JSON, snake_case in Python)"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Basis-Schema für alle Request/Response Modelle.

    JSON verwendet camelCase (checkedIn, rawDates), Python snake_case.
    Requests akzeptieren beide Schreibweisen.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
