"""
Utils 包 - 包含各种工具类
"""

from .log import get_logger, setup_root_logger
from .exceptions import ChatServiceError, ReadError, RemoteError, TransportError
from .image_handler import create_image_content, file_to_data_url
from .message_convert import create_multimodal_message
from .reply_parser import split_reply

__all__ = [
    'get_logger',
    'setup_root_logger',
    'ChatServiceError',
    'ReadError',
    'RemoteError',
    'TransportError',
    'create_image_content',
    'file_to_data_url',
    'create_multimodal_message',
    'split_reply',
]
