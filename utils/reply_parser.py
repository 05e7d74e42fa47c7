"""
模型回复拆分
按 "Thinking:" / "Answer:" 约定（不区分大小写）拆分成推理过程和最终回答
"""
import re

from models.ParsedReply import ParsedReply

THINKING_MARKER = re.compile(r"Thinking:", re.IGNORECASE)
ANSWER_MARKER = re.compile(r"Answer:", re.IGNORECASE)
LEADING_THINKING = re.compile(r"^Thinking:", re.IGNORECASE)


def split_reply(raw: str) -> ParsedReply:
    """
    拆分模型回复，不会失败

    - 找到 "Answer:"：之前为推理（去掉开头的 "Thinking:"），之后为回答；只按第一次出现拆分
    - 只有 "Thinking:"：之后全部为推理，回答为空
    - 都没有：整段原文作为回答（不做 trim）
    """
    raw = raw or ""

    parts = ANSWER_MARKER.split(raw, maxsplit=1)
    if len(parts) > 1:
        thinking = LEADING_THINKING.sub("", parts[0].lstrip(), count=1).strip()
        return ParsedReply(thinking=thinking, answer=parts[1].strip())

    parts = THINKING_MARKER.split(raw, maxsplit=1)
    if len(parts) > 1:
        return ParsedReply(thinking=parts[1].strip(), answer="")

    return ParsedReply(thinking="", answer=raw)
