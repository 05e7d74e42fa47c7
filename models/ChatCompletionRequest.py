"""发送给 chat completions 接口的请求体"""
from pydantic import BaseModel, Field
from typing import List
from .ApiMessage import ApiMessage


class ChatCompletionRequest(BaseModel):
    """聊天完成请求模型"""
    model: str = Field(default="gpt-4o", description="模型名称")
    temperature: float = Field(default=0.7, description="温度参数")
    max_tokens: int = Field(default=1000, description="最大token数")
    messages: List[ApiMessage] = Field(..., description="消息列表")

    def system_message_count(self) -> int:
        return sum(1 for msg in self.messages if msg.role == "system")

    def to_payload(self) -> dict:
        """转换为接口要求的 JSON 结构"""
        return {
            "model": self.model,
            "messages": [msg.to_dict() for msg in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
