from pydantic import BaseModel, ConfigDict


class Category(BaseModel):
    """Pydantic Model to hold a Wikipedia category of a tag."""

    model_config = ConfigDict(frozen=True)

    text: str
    link: str | None = None
    hidden: bool = False
