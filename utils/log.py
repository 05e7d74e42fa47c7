"""创建日志 - 支持层级logger管理"""

import logging
import os

# 根logger名称
ROOT_LOGGER_NAME = "cotchat"


def setup_root_logger(log_file="logs/total.log", level=logging.INFO):
    """
    设置根logger，所有子模块的logger都会继承这个配置

    Args:
        log_file: 日志文件路径，传 None 时只输出到控制台
        level: 日志级别，可以是 int 或 "INFO" 这样的名称

    Returns:
        根logger实例
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # 防止重复添加 handler
    if root_logger.handlers:
        return root_logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger


def get_logger(name: str):
    """
    获取子logger，会自动继承根logger的配置

    Args:
        name: logger名称，建议使用模块名如 'services.openai_chat', 'utils.image_handler'

    Returns:
        子logger实例
    """
    full_name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(full_name)
