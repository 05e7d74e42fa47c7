"""对话历史中的一条记录（展示层使用）"""
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .ApiMessage import ApiMessage


class ConversationEntry(BaseModel):
    role: Literal["system", "user", "assistant"] = Field(..., description="消息角色")
    content: str = Field(default="", description="文本内容（助手消息为最终回答）")
    thinking: Optional[str] = Field(default=None, description="助手的推理过程")
    has_images: bool = Field(default=False, description="用户消息是否附带图片")

    def to_api_message(self) -> ApiMessage:
        """回放为纯文本消息，推理过程和图片不会重新发送"""
        return ApiMessage(role=self.role, content=self.content)
