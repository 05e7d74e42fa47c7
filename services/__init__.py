"""
Services 包 - 远端接口调用与对话编排
"""

from .openai_chat import OpenAIChatAPI
from .chain_of_thought import COT_INSTRUCTION, COT_SYSTEM_PROMPT, apply_chain_of_thought, merge_system_content
from .conversation import ChainOfThoughtConversation
from .uploads import upload_multimedia

__all__ = [
    "OpenAIChatAPI",
    "COT_INSTRUCTION",
    "COT_SYSTEM_PROMPT",
    "apply_chain_of_thought",
    "merge_system_content",
    "ChainOfThoughtConversation",
    "upload_multimedia",
]
