from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_LOCAL_PATH = os.path.join(os.path.expanduser("~"), "ProgramManager")


@dataclass
class AppConfig:
    local_path: str = DEFAULT_LOCAL_PATH
    mirror_path: str = ""

    def to_dict(self) -> dict:
        return {"localPath": self.local_path, "mirrorPath": self.mirror_path}

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        return cls(
            local_path=str(data.get("localPath") or DEFAULT_LOCAL_PATH),
            mirror_path=str(data.get("mirrorPath") or ""),
        )


@dataclass
class FileNode:
    name: str
    path: str
    is_directory: bool
    children: Optional[list["FileNode"]] = None

    def to_dict(self) -> dict:
        d: dict = {"name": self.name, "path": self.path, "isDirectory": self.is_directory}
        if self.children is not None:
            d["children"] = [c.to_dict() for c in self.children]
        return d


@dataclass
class ProgramVersion:
    version: str
    path: str
    modules: list[FileNode] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "path": self.path,
            "modules": [m.to_dict() for m in self.modules],
        }


@dataclass
class Program:
    name: str
    versions: list[ProgramVersion] = field(default_factory=list)

    def find_version(self, version: str) -> Optional[ProgramVersion]:
        for v in self.versions:
            if v.version == version:
                return v
        return None

    def to_dict(self) -> dict:
        return {"name": self.name, "versions": [v.to_dict() for v in self.versions]}
