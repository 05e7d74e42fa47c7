"""
图片处理工具
把本地二进制文件转换为 API 可直接使用的内联内容项 (data URL)
"""
import asyncio
import base64

from models.ContentPart import ImageDetail, ImagePart, ImageUrl
from models.FileBlob import FileBlob
from utils.exceptions import ReadError
from utils.log import get_logger

logger = get_logger(__name__)


def encode_data_url(binary_data: bytes, mime_type: str) -> str:
    """把二进制数据编码为 data:<mime>;base64,<payload>"""
    encoded = base64.b64encode(binary_data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


async def file_to_data_url(file: FileBlob) -> str:
    """
    读取文件并转换为 base64 data URL

    Args:
        file: 待转换的文件

    Returns:
        保留文件声明 MIME 类型的 data URL

    Raises:
        ReadError: 文件不可读或内容损坏
    """
    try:
        binary_data = await asyncio.to_thread(file.read)
    except (OSError, ValueError) as e:
        logger.error(f"读取文件失败 {file.name}: {e}")
        raise ReadError(f"读取文件失败: {file.name}", cause=e) from e

    return encode_data_url(binary_data, file.mime_type)


async def create_image_content(file: FileBlob, detail: ImageDetail = "auto") -> ImagePart:
    """
    从文件创建图片内容项

    Args:
        file: 图片文件
        detail: 图片处理精度 low / high / auto

    Returns:
        ImagePart
    """
    data_url = await file_to_data_url(file)
    logger.debug(f"图片编码完成: {file.name} ({file.mime_type}, {len(data_url)} chars)")
    return ImagePart(image_url=ImageUrl(url=data_url, detail=detail))
