import os
from dataclasses import dataclass
from typing import Optional

import yaml

DEFAULT_SETTINGS_PATH = "settings.yaml"

# 支持的日志等级 (同时用于 logging 和 uvicorn)
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class ConfigError(Exception):
    """settings.yaml 中的配置项无效。"""

@dataclass
class ServerConfig:
    """
    服务启动配置，启动时构建一次，之后只读。
    """
    # 监听地址，默认只对本机开放
    host: str = "127.0.0.1"
    # 监听端口
    port: int = 8080
    # 日志等级: DEBUG / INFO / WARNING / ERROR
    log_level: str = "INFO"
    # 是否输出 uvicorn 的访问日志
    access_log: bool = False
    # 是否把 /api/file 的结果写入剪贴板
    clipboard_enabled: bool = True
    # 前端打包产物目录，设置后挂载到 /
    static_dir: Optional[str] = None

# settings.yaml 中的键 -> (ServerConfig 字段, 期望类型)
_SETTINGS_KEYS = {
    "SERVER_HOST":       ("host", str),
    "SERVER_PORT":       ("port", int),
    "LOG_LEVEL":         ("log_level", str),
    "ACCESS_LOG":        ("access_log", bool),
    "CLIPBOARD_ENABLED": ("clipboard_enabled", bool),
    "STATIC_DIR":        ("static_dir", str),
}

def load_settings(path: str = DEFAULT_SETTINGS_PATH) -> ServerConfig:
    """
    读取 settings.yaml 并构建 ServerConfig。

    文件不存在时全部使用默认值；未设置或为空的键也使用默认值。

    Raises:
        ConfigError: 文件内容不是映射，或某个键的类型不正确。
    """
    if not os.path.exists(path):
        return ServerConfig()

    with open(path, "r", encoding="utf-8") as f:
        settings_data = yaml.safe_load(f.read()) or {}
    if not isinstance(settings_data, dict):
        raise ConfigError(f"{path}: 配置文件顶层必须是键值映射")

    values = {}
    for key, (field_name, expected_type) in _SETTINGS_KEYS.items():
        value = settings_data.get(key)
        if value is None:
            continue
        # bool 是 int 的子类, 端口号不能写成 true/false
        if not isinstance(value, expected_type) or (expected_type is int and isinstance(value, bool)):
            raise ConfigError(f"{path}: {key} 应为 {expected_type.__name__}，实际为 {value!r}")
        values[field_name] = value

    config = ServerConfig(**values)
    if not 0 < config.port < 65536:
        raise ConfigError(f"{path}: SERVER_PORT 超出范围: {config.port}")
    if config.log_level.upper() not in LOG_LEVELS:
        raise ConfigError(f"{path}: LOG_LEVEL 应为 {'/'.join(LOG_LEVELS)} 之一，实际为 {config.log_level!r}")
    config.log_level = config.log_level.upper()
    return config
