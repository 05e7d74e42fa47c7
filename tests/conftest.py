import os

# 测试中不写日志文件，也不读取真实凭证
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("API_KEY", "test-key")

from unittest.mock import Mock

import pytest

from config import Settings
from models.FileBlob import FileBlob
from services.openai_chat import OpenAIChatAPI

# 1x1 像素 PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c63f8cfc0f01f0005000201e2213c9b"
    "0000000049454e44ae426082"
)


def make_response(status_code=200, json_data=None, reason="OK"):
    """构造 requests.Response 的替身"""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data if json_data is not None else {}
    return response


def completion_payload(content="Thinking: a\nAnswer: b", finish_reason="stop"):
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": finish_reason,
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    }


@pytest.fixture
def api():
    return OpenAIChatAPI(api_key="sk-injected", settings=Settings())


@pytest.fixture
def png_blob():
    return FileBlob(name="pixel.png", mime_type="image/png", data=PNG_BYTES)
