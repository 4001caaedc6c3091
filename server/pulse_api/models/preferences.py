"""Display preference model."""
from pydantic import BaseModel, Field, ConfigDict


class Preferences(BaseModel):
    """User display preferences."""

    model_config = ConfigDict(populate_by_name=True)

    dark_mode: bool = Field(default=False, alias="darkMode")
