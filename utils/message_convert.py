import asyncio
from typing import Sequence

from models.ApiMessage import ApiMessage, Role
from models.ContentPart import TextPart
from models.FileBlob import FileBlob
from utils.image_handler import create_image_content


async def create_multimodal_message(
    text: str,
    files: Sequence[FileBlob] = (),
    role: Role = "user",
) -> ApiMessage:
    """
    把文本和可选的图片文件合成一条消息
    没有图片时 content 为纯字符串；有图片时文本项始终在图片项之前
    任一图片编码失败时抛出 ReadError，不返回部分构建的消息
    """
    if not files:
        return ApiMessage(role=role, content=text)

    # gather 的结果顺序与提交顺序一致
    image_parts = await asyncio.gather(*(create_image_content(f) for f in files))

    return ApiMessage(role=role, content=[TextPart(text=text), *image_parts])
