"""
Base class for domain models that can be written into a request body.
"""

from pydantic import BaseModel, ConfigDict


class Parsable(BaseModel):
    """Domain model serializable by a SerializationWriter."""

    model_config = ConfigDict(populate_by_name=True)
