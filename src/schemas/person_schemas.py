"""Star Wars API person payload schema.

Pydantic schema for the JSON body of ``GET /people/{id}``. Only ``name`` is
required; the API sends many more fields (height, films, ...) which are
ignored.

Reference:
    - https://swapi.dev/documentation#people
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class PersonPayload(BaseModel):
    """Person resource as returned by the Star Wars API.

    Attributes:
        name: Person name. Must be a JSON string; numbers are not coerced.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr = Field(
        ..., description="Person name", examples=["Luke Skywalker"]
    )
