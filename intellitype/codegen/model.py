"""Input model for code generation.

Model objects describe the named entities of a host project together with their
typed properties. They are built by the caller (or read by the ModelLoader) and
never mutated once handed to an emitter.
"""

from pydantic import BaseModel, ConfigDict, Field

__all__ = ['ModelProperty', 'ModelObject', 'ModelDocument']


class ModelProperty(BaseModel):
    """A single property of a model object.

    Attributes:
        name: The property identifier.
        type: Free-form type descriptor in the host system's notation,
            e.g. ``int?``, ``System.String[]`` or
            ``System.Collections.Generic.List<Widget>``.
        summary: Optional documentation text, used by the stub notation only.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    summary: str | None = None


class ModelObject(BaseModel):
    """A named entity with an ordered sequence of properties."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    full_name: str = Field(..., alias='fullName')
    properties: tuple[ModelProperty, ...] = ()


class ModelDocument(BaseModel):
    """The on-disk form of a generation run's input."""

    model_config = ConfigDict(frozen=True)

    objects: tuple[ModelObject, ...] = ()
