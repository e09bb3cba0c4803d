from __future__ import annotations

import enum
import secrets
import string
from dataclasses import dataclass
from typing import Optional, Protocol

import petname
from pydantic import BaseModel, Field, field_validator

ALPHANUMERIC = string.ascii_letters + string.digits


class NameGenerator(Protocol):
    def generate(self) -> Optional[str]:
        ...


class RandomURLType(str, enum.Enum):
    petname = "petname"
    alphanumeric = "alphanumeric"


class RandomURLConfig(BaseModel):
    """Replacement names for stored pastes; ``None`` while disabled."""

    enabled: bool = False
    type: RandomURLType = RandomURLType.petname
    words: int = Field(default=2, ge=1)
    separator: str = Field(default="-")
    length: int = Field(default=8, ge=1)

    @field_validator("separator")
    @classmethod
    def _reject_path_separators(cls, value: str) -> str:
        if any(char in value for char in ("/", "\\", "\0")):
            raise ValueError("separator must not contain path separators")
        return value

    def generate(self) -> Optional[str]:
        if not self.enabled:
            return None
        if self.type == RandomURLType.petname:
            return petname.generate(words=self.words, separator=self.separator)
        return "".join(secrets.choice(ALPHANUMERIC) for _ in range(self.length))


@dataclass(frozen=True)
class NamingPolicy:
    default_extension: str
    generator: NameGenerator

    def generate(self) -> Optional[str]:
        return self.generator.generate()

    @classmethod
    def from_settings(cls, settings) -> "NamingPolicy":
        return cls(
            default_extension=settings.paste.default_extension,
            generator=settings.paste.random_url,
        )
