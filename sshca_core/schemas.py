"""Request schemas for backend paths."""
from typing import Any, Dict, Optional

import pydantic
from pydantic import BaseModel, Field, field_validator


class ConfigCARequest(BaseModel):
    """
    Body of an UPDATE on config/ca.

    generate_signing_key defaults to true, but only an explicit value
    counts as set; see flag_set().
    """
    private_key: str = Field(
        "", description="Private half of the SSH key that will be used to sign certificates."
    )
    public_key: str = Field(
        "", description="Public half of the SSH key that will be used to sign certificates."
    )
    generate_signing_key: bool = Field(
        True,
        description="Generate SSH key pair internally rather than use the private_key and public_key fields.",
    )

    @field_validator("private_key", "public_key")
    @classmethod
    def must_be_utf8(cls, v: str) -> str:
        try:
            v.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"contains characters that are not valid UTF-8 ({exc.reason})") from None
        return v

    def flag_set(self, name: str) -> Optional[Any]:
        """The field's value if the caller supplied it, else None."""
        if name in self.model_fields_set:
            return getattr(self, name)
        return None


def parse_body(schema: type[BaseModel], raw: Optional[Dict[str, Any]]) -> BaseModel:
    # explicit nulls behave like omitted fields
    data = {k: v for k, v in (raw or {}).items() if v is not None}
    return schema.model_validate(data)


def validation_message(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{loc}: {err['msg']}")
    return "invalid request: " + "; ".join(parts)
