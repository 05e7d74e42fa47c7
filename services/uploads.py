from typing import Any, Dict, Optional, Sequence

from models.FileBlob import FileBlob
from services.openai_chat import OpenAIChatAPI
from utils.exceptions import ChatServiceError
from utils.log import get_logger

logger = get_logger(__name__)


async def upload_multimedia(api: OpenAIChatAPI, files: Sequence[FileBlob]) -> Optional[Dict[str, Any]]:
    """
    上传多媒体文件
    与对话请求不同，上传失败只记录日志并返回 None，不向上抛出
    """
    logger.info(f"上传多媒体文件: {[f.name for f in files]}")
    try:
        return await api.upload_files(files)
    except ChatServiceError as e:
        logger.error(f"上传多媒体文件失败: {e}")
        return None
