import logging
import sys

# 全局日志记录器, 所有模块通过 `from getGlobalLogger import logger` 共用
logger = logging.getLogger("FileTreeClipboard")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(module)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(_handler)
    logger.setLevel(logging.INFO)
    # 不向 root logger 传播, 避免 uvicorn 的日志配置重复输出
    logger.propagate = False

def setLogLevel(level):
    # level 可以是 "DEBUG"/"INFO" 这样的字符串, 也可以是 logging.DEBUG 这样的整数
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
