"""多模态消息的内容项"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

ImageDetail = Literal["low", "high", "auto"]


class TextPart(BaseModel):
    """文本内容项"""
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    text: str = Field(..., description="文本内容")


class ImageUrl(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="图片地址，本地图片为 data URL (data:image/png;base64,...)")
    detail: ImageDetail = Field(default="auto", description="图片处理精度: low, high, auto")


class ImagePart(BaseModel):
    """图片内容项"""
    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


ContentPart = Annotated[Union[TextPart, ImagePart], Field(discriminator="type")]
