# app/models/greeting.py

from pydantic import BaseModel, ConfigDict

class Greeting(BaseModel):
    # Immutable: built once per request, then serialized
    model_config = ConfigDict(frozen=True)

    greeting: str
    name: str
