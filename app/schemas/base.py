from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes as camelCase; accepts camelCase or snake_case on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def required(**kwargs):
    # empty strings count as missing, like an absent key
    return Field(..., min_length=1, **kwargs)


class LoginRequest(CamelModel):
    email: str = required()
    password: str = required()
