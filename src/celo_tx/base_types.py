"""Pydantic base model for camelCase JSON-RPC shaped data."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Model whose fields are read from and dumped to camelCase keys, while
    the Python attributes stay snake_case.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
