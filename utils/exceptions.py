"""自定义异常类"""

import json
from typing import Any, Dict, Optional


class ChatServiceError(Exception):
    """基础异常"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ReadError(ChatServiceError):
    """本地文件读取/编码失败"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class RemoteError(ChatServiceError):
    """远端返回非 2xx 状态码"""

    def __init__(self, status_code: int, reason: str = "", error_body: Optional[Dict[str, Any]] = None):
        self.reason = reason
        self.error_body = error_body if error_body is not None else {}
        super().__init__(
            f"OpenAI API error: {status_code} {reason} {json.dumps(self.error_body, ensure_ascii=False)}",
            status_code,
        )


class TransportError(ChatServiceError):
    """网络层失败，未收到任何响应"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
