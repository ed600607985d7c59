"""
Shared pydantic base for domain models.

The API speaks camelCase JSON while Python code uses snake_case attributes.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either naming on input."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
