"""Admin login log entry"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AdminLoginRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    email: str
    login_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_storage(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
