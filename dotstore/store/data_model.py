from pydantic import BaseModel, ConfigDict, Field, field_validator

from dotstore.core.enums import Scope


class DotStoreModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )


class StoreConfig(DotStoreModel):
    base: str
    """
    Application identifier. Entries are stored under `.<base>` directories.
    """
    dir_mode: int = Field(default=0o700, ge=0, le=0o777)
    """
    Permissions of created directories.
    """
    file_mode: int = Field(default=0o600, ge=0, le=0o777)
    """
    Permissions of created files.
    """
    encoding: str = "utf-8"
    encoding_errors: str = "surrogateescape"
    """
    Error handler used when encoding and decoding values. The default lets any byte content round-trip.
    """

    @field_validator("base")
    @classmethod
    def validate_base(cls, v: str) -> str:
        if not v:
            raise ValueError("Base name must not be empty.")
        if "/" in v or "\\" in v:
            raise ValueError(f"Base name `{v}` must not contain path separators.")
        return v

    @property
    def dirname(self) -> str:
        return f".{self.base}"


class ScopedValue(DotStoreModel):
    scope: Scope
    value: str
