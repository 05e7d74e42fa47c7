"""配置加载 - 从环境变量 / .env 文件读取进程级配置"""

import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings(BaseModel):
    """应用配置，构造后只读"""
    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = Field(default=None, description="OpenAI API key，不在本地校验")
    base_url: str = Field(default="https://api.openai.com/v1", description="API 基础地址")
    model: str = Field(default="gpt-4o", description="默认多模态模型")
    temperature: float = Field(default=0.7, description="温度参数")
    max_tokens: int = Field(default=1000, description="最大token数")
    request_timeout: Optional[float] = Field(default=None, description="请求超时（秒），默认不限制")

    log_file: str = Field(default="logs/total.log", description="日志文件路径")
    log_level: str = Field(default="INFO", description="日志级别")

    host: str = Field(default="127.0.0.1", description="服务监听地址")
    port: int = Field(default=8001, description="服务监听端口")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="允许的跨域来源")

    @classmethod
    def from_env(cls) -> "Settings":
        """从环境变量构建配置"""
        return cls(
            api_key=os.getenv("API_KEY"),
            base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
            model=os.getenv("OPENAI_MODEL", "gpt-4o"),
            temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
            max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "1000")),
            request_timeout=_optional_float(os.getenv("OPENAI_TIMEOUT")),
            log_file=os.getenv("LOG_FILE", "logs/total.log"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8001")),
            cors_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取全局配置（只在首次调用时读取环境变量）"""
    return Settings.from_env()
