from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    # JSON uses camelCase (coverNote, totalPages); snake_case is accepted on input too.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
