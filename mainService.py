import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import get_settings
from models.RouteModels import ChatRouteRequest, ChatRouteResponse, UploadedFileInfo, UploadRouteResponse
from services.openai_chat import OpenAIChatAPI
from utils.log import setup_root_logger, get_logger

settings = get_settings()

# 首先设置根logger
root_logger = setup_root_logger(settings.log_file, settings.log_level)
logger = get_logger("main")

# FastAPI 应用
app = FastAPI(title="Chain-of-Thought Multimodal Chat API", version="1.0.0")

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_chat_api = None


def get_chat_api() -> OpenAIChatAPI:
    """懒加载 API 客户端，测试中通过 dependency_overrides 替换"""
    global _chat_api
    if _chat_api is None:
        _chat_api = OpenAIChatAPI(settings=settings)
    return _chat_api


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@app.post("/api/chat")
async def chat(request: Request, api: OpenAIChatAPI = Depends(get_chat_api)):
    """思维链对话接口，返回 thinking / answer"""
    try:
        body = await request.json()
    except ValueError as e:
        logger.error(f"Error in chat API route: {e}")
        return _error("Failed to process request", 500)

    raw_messages = body.get("messages") if isinstance(body, dict) else None
    if not isinstance(raw_messages, list):
        return _error("Messages array is required", 400)

    try:
        chat_request = ChatRouteRequest.model_validate(body)
    except ValidationError as e:
        logger.warning(f"消息格式错误: {e}")
        return _error("Invalid message format", 400)

    try:
        reply = await api.get_chain_of_thought_response(chat_request.messages)
    except Exception as e:
        logger.error(f"Error in chat API route: {e}", exc_info=True)
        return _error("Failed to process request", 500)

    return ChatRouteResponse(thinking=reply.thinking, answer=reply.answer).model_dump()


@app.get("/api/chat")
async def chat_status():
    return {"message": "Chat API is running"}


@app.post("/api/upload")
async def upload(request: Request):
    """接收 multipart 文件，只返回文件信息，不经过编码器"""
    content_type = request.headers.get("content-type", "")
    if "multipart/form-data" not in content_type:
        return _error("Request must be multipart/form-data", 400)

    try:
        form = await request.form()
        # 普通文本字段没有 filename
        files = [f for f in form.getlist("files") if getattr(f, "filename", None) is not None]
        if not files:
            return _error("No files uploaded", 400)

        details = []
        for f in files:
            size = f.size if f.size is not None else len(await f.read())
            details.append(UploadedFileInfo(
                name=f.filename or "",
                type=f.content_type or "",
                size=size,
            ))
    except Exception as e:
        logger.error(f"Error in upload API route: {e}", exc_info=True)
        return _error("Failed to process file upload", 500)

    return UploadRouteResponse(files=details).model_dump()


@app.get("/api/upload")
async def upload_status():
    return {"message": "File upload API is running"}


@app.get("/")
async def root():
    """根路径信息"""
    return {
        "message": "Chain-of-Thought Multimodal Chat API",
        "version": "1.0.0",
        "endpoints": {
            "chat": "/api/chat",
            "upload": "/api/upload"
        }
    }


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="info"
    )
