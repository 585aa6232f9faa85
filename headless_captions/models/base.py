"""Shared pydantic base for scraped records"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ScrapedModel(BaseModel):
    """Snake-case attributes in Python, camelCase keys when dumped by alias"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
