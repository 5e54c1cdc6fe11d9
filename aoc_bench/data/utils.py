from pydantic import BaseModel, ConfigDict


class BaseModelWithDocstrings(BaseModel):
    """Frozen base model with the attribute docstrings being extracted to the model JSON schema."""

    model_config = ConfigDict(use_attribute_docstrings=True, frozen=True)
