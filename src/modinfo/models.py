from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Placeholder rendered for a module with no recorded version
DEVEL_VERSION = "(devel)"


def _check_encodable(v: str) -> str:
    # Fields must survive the encoder's UTF-8/surrogateescape round trip
    try:
        v.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as e:
        raise ValueError(f"value is not encodable as build-info text: {e.reason}") from e
    return v


class Module(BaseModel):
    """A versioned module, optionally replaced by another module"""
    model_config = ConfigDict(frozen=True)

    path: str = Field("", description="Module path")
    version: str = Field("", description="Module version, empty when unknown")
    checksum: str = Field("", description="Module checksum, empty when not applicable")
    replace: Optional["Module"] = Field(None, description="Module this one is replaced by")

    @field_validator("path", "version", "checksum")
    @classmethod
    def validate_encodable(cls, v):
        return _check_encodable(v)

    @property
    def effective_version(self) -> str:
        """Version as written to build-info text"""
        return self.version or DEVEL_VERSION


Module.model_rebuild()


class BuildInfo(BaseModel):
    """Build information embedded in a compiled program"""
    model_config = ConfigDict(frozen=True)

    main_path: str = Field("", description="Path of the main package")
    main: Module = Field(default_factory=Module, description="Module containing the main package")
    deps: Tuple[Module, ...] = Field(default_factory=tuple, description="Module dependencies, in recorded order")

    @field_validator("main_path")
    @classmethod
    def validate_encodable(cls, v):
        return _check_encodable(v)

    def marshal_text(self) -> bytes:
        """Serialize to build-info text"""
        from .codec.encoder import encode
        return encode(self)

    @classmethod
    def unmarshal_text(cls, data: bytes) -> "BuildInfo":
        """
        Parse build-info text.

        Raises:
            FormatError: If a line is malformed
        """
        from .codec.decoder import decode
        return decode(data)

    def __str__(self) -> str:
        return self.marshal_text().decode("utf-8", "surrogateescape")
