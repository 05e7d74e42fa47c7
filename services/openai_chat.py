import asyncio
from typing import Any, Dict, Optional, Sequence

import requests

from config import Settings, get_settings
from models.ApiMessage import ApiMessage
from models.ChatCompletionRequest import ChatCompletionRequest
from models.ChatCompletionResponse import ChatCompletionResponse
from models.FileBlob import FileBlob
from models.ParsedReply import ParsedReply
from services.chain_of_thought import apply_chain_of_thought
from utils.exceptions import ChatServiceError, ReadError, RemoteError, TransportError
from utils.log import get_logger
from utils.reply_parser import split_reply

logger = get_logger(__name__)


def _parse_error_body(response: requests.Response) -> Dict[str, Any]:
    """尽量解析错误响应体，无法解析时返回空字典"""
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {"error": body}


class OpenAIChatAPI:
    """
    OpenAI chat completions 调用类
    凭证在构造时注入，不在调用中读取全局状态
    """
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        # 不在本地校验 key，缺失时由远端返回认证错误
        self.api_key = api_key if api_key is not None else settings.api_key
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.model_name = model_name or settings.model
        self.temperature = temperature if temperature is not None else settings.temperature
        self.max_tokens = max_tokens if max_tokens is not None else settings.max_tokens
        self.timeout = timeout if timeout is not None else settings.request_timeout

        if not self.api_key:
            logger.warning("未配置 API key，请求将由远端拒绝")

    @property
    def completions_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    @property
    def files_url(self) -> str:
        return f"{self.base_url}/files"

    def _auth_headers(self, api_key: Optional[str] = None) -> Dict[str, str]:
        return {"Authorization": f"Bearer {api_key or self.api_key}"}

    def build_request(
        self,
        messages: Sequence[ApiMessage],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        enable_cot: bool = False,
    ) -> ChatCompletionRequest:
        """构建请求体，enable_cot 时注入思维链指令"""
        processed = apply_chain_of_thought(messages) if enable_cot else list(messages)
        return ChatCompletionRequest(
            model=model or self.model_name,
            temperature=temperature if temperature is not None else self.temperature,
            max_tokens=max_tokens if max_tokens is not None else self.max_tokens,
            messages=processed,
        )

    async def _post(self, url: str, **kwargs) -> requests.Response:
        try:
            return await asyncio.to_thread(requests.post, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"[ERROR] 请求 {url} 失败: {e}")
            raise TransportError(f"无法连接到 {url}: {e}", cause=e) from e

    def _raise_for_status(self, response: requests.Response, action: str):
        if 200 <= response.status_code < 300:
            return
        error_body = _parse_error_body(response)
        logger.error(f"[ERROR] {action} 错误响应: {response.status_code} {error_body}")
        raise RemoteError(response.status_code, response.reason or "", error_body)

    async def chat_completion(
        self,
        messages: Sequence[ApiMessage],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        api_key: Optional[str] = None,
        enable_cot: bool = False,
    ) -> ChatCompletionResponse:
        """
        接收 ApiMessage 列表，调用模型推理，返回响应对象

        Raises:
            RemoteError: 非 2xx 响应
            TransportError: 网络层失败
        """
        request = self.build_request(messages, model, temperature, max_tokens, enable_cot)

        logger.info(f"[DEBUG] 发送到API的消息数量: {len(request.messages)} (cot={enable_cot}, model={request.model})")

        headers = {"Content-Type": "application/json", **self._auth_headers(api_key)}
        response = await self._post(self.completions_url, headers=headers, json=request.to_payload())
        self._raise_for_status(response, "chat completions")

        try:
            result = ChatCompletionResponse.model_validate(response.json())
        except ValueError as e:
            raise RemoteError(response.status_code, "invalid JSON response", {}) from e

        if result.choices:
            logger.info(f"模型响应完成, finish_reason={result.choices[0].finish_reason}")
        return result

    async def get_response_text(self, messages: Sequence[ApiMessage], **options) -> str:
        """只返回第一个 choice 的文本，缺失时为空字符串"""
        response = await self.chat_completion(messages, **options)
        return response.first_content()

    async def get_chain_of_thought_response(self, messages: Sequence[ApiMessage], **options) -> ParsedReply:
        """开启思维链，返回拆分后的 thinking / answer"""
        options["enable_cot"] = True
        try:
            text = await self.get_response_text(messages, **options)
        except ChatServiceError as e:
            logger.warning(f"思维链请求失败: {e}")
            raise
        return split_reply(text)

    async def upload_files(self, files: Sequence[FileBlob], purpose: str = "vision") -> Dict[str, Any]:
        """
        以 multipart/form-data 上传文件到远端文件存储

        Returns:
            远端返回的 JSON
        """
        multipart = []
        for f in files:
            try:
                content = await asyncio.to_thread(f.read)
            except (OSError, ValueError) as e:
                raise ReadError(f"读取待上传文件失败: {f.name}", cause=e) from e
            multipart.append(("file", (f.name, content, f.mime_type)))

        logger.info(f"上传文件数量: {len(multipart)}")
        response = await self._post(
            self.files_url,
            headers=self._auth_headers(),
            data={"purpose": purpose},
            files=multipart,
        )
        self._raise_for_status(response, "file upload")
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(response.status_code, "invalid JSON response", {}) from e
