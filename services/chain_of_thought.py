"""
思维链 (chain-of-thought) 指令注入
保证处理后的消息列表中只有一条 system 消息
"""
from typing import List, Sequence, Union

from models.ApiMessage import ApiMessage
from models.ContentPart import ContentPart

COT_INSTRUCTION = (
    "Use chain-of-thought reasoning. For each response, first think step-by-step about the problem "
    "before providing your final answer. Structure your response with \"Thinking:\" followed by your "
    "reasoning process, and then \"Answer:\" followed by your final response."
)

COT_SYSTEM_PROMPT = (
    "You are a helpful assistant that uses chain-of-thought reasoning. For each response, first think "
    "step-by-step about the problem before providing your final answer. Structure your response with "
    "\"Thinking:\" followed by your reasoning process, and then \"Answer:\" followed by your final response."
)


def merge_system_content(
    content: Union[str, List[ContentPart]],
    instruction: str = COT_INSTRUCTION,
) -> Union[str, List[ContentPart]]:
    """把指令追加到 system 消息内容后面；内容项列表不做修改"""
    if not isinstance(content, str):
        return content
    return f"{content} {instruction}"


def apply_chain_of_thought(messages: Sequence[ApiMessage]) -> List[ApiMessage]:
    """
    返回注入思维链指令后的新消息列表，不修改传入的列表

    - 没有 system 消息：在开头插入一条
    - 已有 system 消息：原位置追加指令，不会产生第二条
    """
    processed = list(messages)
    if not processed:
        return processed

    if not any(msg.role == "system" for msg in processed):
        return [ApiMessage(role="system", content=COT_SYSTEM_PROMPT), *processed]

    return [
        msg.model_copy(update={"content": merge_system_content(msg.content)}) if msg.role == "system" else msg
        for msg in processed
    ]
