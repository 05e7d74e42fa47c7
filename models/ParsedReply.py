from pydantic import BaseModel, ConfigDict, Field


class ParsedReply(BaseModel):
    """模型回复拆分后的结果，两个字段始终存在"""
    model_config = ConfigDict(frozen=True)

    thinking: str = Field(default="", description="推理过程")
    answer: str = Field(default="", description="最终回答")
