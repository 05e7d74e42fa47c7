"""待编码的二进制文件（内存数据或磁盘路径 + MIME 类型）"""
import mimetypes
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

DEFAULT_MIME_TYPE = "application/octet-stream"


class FileBlob(BaseModel):
    name: str = Field(default="", description="文件名")
    mime_type: str = Field(default="", description="声明的 MIME 类型")
    data: Optional[bytes] = Field(default=None, description="内存中的文件内容")
    path: Optional[Path] = Field(default=None, description="磁盘文件路径")

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        if values.get("data") is None and values.get("path") is None:
            raise ValueError("FileBlob 需要 data 或 path")
        if not values.get("name") and values.get("path") is not None:
            values["name"] = Path(values["path"]).name
        if not (values.get("mime_type") or "").strip():
            guessed, _ = mimetypes.guess_type(values.get("name") or "")
            values["mime_type"] = guessed or DEFAULT_MIME_TYPE
        return values

    @classmethod
    def from_path(cls, path, mime_type: str = "") -> "FileBlob":
        return cls(path=Path(path), mime_type=mime_type)

    @property
    def size(self) -> int:
        if self.data is not None:
            return len(self.data)
        return self.path.stat().st_size

    def read(self) -> bytes:
        """读取文件内容，失败时抛出 OSError"""
        if self.data is not None:
            return self.data
        with open(self.path, "rb") as f:
            return f.read()

