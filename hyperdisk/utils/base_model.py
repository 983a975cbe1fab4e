# utils/base_model.py
from pydantic import BaseModel, ConfigDict


class ImmutableModel(BaseModel):
    """
    Base class for all geometric value types.

    Instances are frozen after creation and reject unknown fields, so a value
    can only be obtained through its validators and is never partially valid.
    Derived values are produced by constructing new instances.
    """
    model_config = ConfigDict(
        frozen=True,  # Make all instances immutable
        extra="forbid",
    )
