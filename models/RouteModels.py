"""HTTP 接口的请求/响应模型"""
from typing import List

from pydantic import BaseModel, Field

from .ApiMessage import ApiMessage


class ChatRouteRequest(BaseModel):
    """前端 /api/chat 请求"""
    messages: List[ApiMessage] = Field(..., description="消息列表")


class ChatRouteResponse(BaseModel):
    thinking: str = ""
    answer: str = ""


class UploadedFileInfo(BaseModel):
    name: str
    type: str
    size: int


class UploadRouteResponse(BaseModel):
    message: str = "Files uploaded successfully"
    files: List[UploadedFileInfo] = Field(default_factory=list)
