from typing import Annotated, Any

from pydantic import BeforeValidator, StringConstraints


def normalize_language_code(value: Any) -> Any:  # noqa: ANN401
    if isinstance(value, str):
        return value.strip().lower()
    return value


# A tiny type for a Wikipedia language code, the subdomain of a wiki (`en`, `it`, `zh-yue`).
LanguageCode = Annotated[
    str,
    BeforeValidator(normalize_language_code),
    StringConstraints(pattern=r"^[a-z0-9]+(-[a-z0-9]+)*$"),
]
