"""规定送给openai api风格的消息格式"""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .ContentPart import ContentPart

Role = Literal["system", "user", "assistant", "function"]


class ApiMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role = Field(..., description="消息角色: system, user, assistant, function")
    content: Union[str, List[ContentPart]] = Field(..., description="消息内容，可以是字符串或内容项列表")
    name: Optional[str] = Field(default=None, max_length=64, description="消息作者名称")

    def to_dict(self) -> dict:
        """转换为字典格式"""
        return self.model_dump(exclude_none=True)
