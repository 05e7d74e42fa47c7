"""
Models 包 - 数据模型定义
"""

# 导入所有模型类
from .ContentPart import TextPart, ImageUrl, ImagePart, ContentPart, ImageDetail
from .ApiMessage import ApiMessage, Role
from .ChatCompletionRequest import ChatCompletionRequest
from .ChatCompletionResponse import ChatCompletionResponse, ChatCompletionResponseChoice, ResponseMessage, Usage
from .ParsedReply import ParsedReply
from .FileBlob import FileBlob
from .ConversationEntry import ConversationEntry
from .RouteModels import ChatRouteRequest, ChatRouteResponse, UploadedFileInfo, UploadRouteResponse

# 定义包的公共接口
__all__ = [
    # 多模态内容项
    "TextPart",
    "ImageUrl",
    "ImagePart",
    "ContentPart",
    "ImageDetail",

    # 送给LLM API的消息类型
    "ApiMessage",
    "Role",

    # API请求/响应模型
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionResponseChoice",
    "ResponseMessage",
    "Usage",

    # 拆分后的回复
    "ParsedReply",

    # 待编码文件
    "FileBlob",

    # 对话记录
    "ConversationEntry",

    # HTTP 接口模型
    "ChatRouteRequest",
    "ChatRouteResponse",
    "UploadedFileInfo",
    "UploadRouteResponse",
]
