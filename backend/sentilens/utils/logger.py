"""日志配置"""
import logging
import os
from logging.handlers import RotatingFileHandler

from sentilens.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings) -> None:
    """配置根日志：控制台 + 可选的文件轮转"""
    formatter = logging.Formatter(LOG_FORMAT)

    # 1. 控制台处理器
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    # 2. 文件轮转处理器 (10MB * 5 backups)
    if settings.log_to_file:
        if not os.path.exists(settings.log_dir):
            os.makedirs(settings.log_dir)
        file_handler = RotatingFileHandler(
            os.path.join(settings.log_dir, "sentilens.log"),
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """获取日志记录器（级别与输出由 setup_logging 配置的根日志负责）"""
    return logging.getLogger(name)
