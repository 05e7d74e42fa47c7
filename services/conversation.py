"""
单轮对话编排
文本 + 图片 -> 多模态消息 -> 思维链请求 -> 拆分回复 -> 成功后写入历史
"""
from typing import List, Sequence

from models.ApiMessage import ApiMessage
from models.ConversationEntry import ConversationEntry
from models.FileBlob import FileBlob
from models.ParsedReply import ParsedReply
from services.openai_chat import OpenAIChatAPI
from utils.log import get_logger
from utils.message_convert import create_multimodal_message

logger = get_logger(__name__)


class ChainOfThoughtConversation:
    """内存中的对话历史，同一时间只应有一个进行中的请求"""

    def __init__(self, api: OpenAIChatAPI):
        self.api = api
        self.entries: List[ConversationEntry] = []

    def history(self) -> List[ApiMessage]:
        """以纯文本消息形式回放历史"""
        return [entry.to_api_message() for entry in self.entries]

    def clear(self):
        self.entries = []

    async def send(self, text: str, files: Sequence[FileBlob] = (), **options) -> ParsedReply:
        """
        发送一轮对话

        Args:
            text: 用户输入
            files: 附带的图片文件
            options: 透传给 get_chain_of_thought_response 的参数

        Returns:
            ParsedReply

        任何失败都会向上抛出，且不会修改历史
        """
        if not text.strip() and not files:
            raise ValueError("消息内容不能为空")

        message = await create_multimodal_message(text, files)
        reply = await self.api.get_chain_of_thought_response([*self.history(), message], **options)

        self.entries.append(ConversationEntry(role="user", content=text, has_images=bool(files)))
        self.entries.append(ConversationEntry(role="assistant", content=reply.answer, thinking=reply.thinking))
        logger.info(f"对话轮次完成，当前历史条数: {len(self.entries)}")
        return reply
