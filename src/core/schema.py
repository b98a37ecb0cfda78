from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_serializer


class BaseSchema(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    @field_serializer("*", mode="wrap", when_used="unless-none")
    def serialize_datetime(self, value, handler, info):
        """Custom serializer for datetime objects and enums"""
        result = handler(value)
        if isinstance(result, datetime):
            return result.timestamp()
        elif isinstance(result, Enum):
            return result.value
        return result
