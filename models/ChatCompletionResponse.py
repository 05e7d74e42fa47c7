"""chat completions 接口的响应结构，只依赖 choices[0].message.content"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str = "assistant"
    content: Optional[str] = None


class ChatCompletionResponseChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = 0
    message: Optional[ResponseMessage] = None
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    object: str = "chat.completion"
    created: int = 0
    model: str = ""
    choices: List[ChatCompletionResponseChoice] = Field(default_factory=list)
    usage: Optional[Usage] = None

    def first_content(self) -> str:
        """返回第一个 choice 的文本内容，缺失时返回空字符串"""
        if not self.choices or self.choices[0].message is None:
            return ""
        return self.choices[0].message.content or ""
