# pmdetect/models.py
from __future__ import annotations
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class PackageManifest(BaseModel):
    """The slice of package.json pmdetect cares about."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    package_manager: StrictStr | None = Field(default=None, alias="packageManager")


class DetectOptions(BaseModel):
    auto_install: bool = False
    programmatic: bool = False
    cwd: Path | None = None

    @field_validator("cwd")
    @classmethod
    def absolute_cwd(cls, v: Path | None) -> Path | None:
        if v is None:
            return v
        return Path(os.path.abspath(v.expanduser()))

    def start_dir(self) -> Path:
        """Directory the search starts from (the process cwd if unset)."""
        return self.cwd if self.cwd is not None else Path.cwd()


@dataclass
class Location:
    lockfile: Path | None
    manifest: Path | None


@dataclass
class Resolution:
    agent: str | None
    version: str | None
    lockfile: Path | None = None
    manifest: Path | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        for key in ("lockfile", "manifest"):
            if data[key] is not None:
                data[key] = str(data[key])
        return data
