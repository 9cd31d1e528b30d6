import os
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config import DEFAULT_SETTINGS_PATH, ServerConfig, load_settings
from tree_router import router as tree_router
from getGlobalLogger import logger, setLogLevel

def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """
    根据配置构建 FastAPI 应用。

    路由表与配置都挂在应用实例上，不使用进程级的全局状态。
    """
    if config is None:
        config = ServerConfig()

    app = FastAPI(
        title="File Tree Clipboard",
        description="以 HTTP 接口浏览本地目录树，并将文件内容复制到剪贴板",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
    )
    app.state.config = config
    app.include_router(tree_router)

    # 前端页面 (可选)，必须在 API 路由之后挂载
    if config.static_dir:
        if os.path.isdir(config.static_dir):
            app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
        else:
            logger.warning(f"前端目录不存在，跳过挂载: {config.static_dir}")

    return app

if __name__ == "__main__":
    settings_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SETTINGS_PATH
    config = load_settings(settings_path)
    setLogLevel(config.log_level)

    app = create_app(config)
    print(f"🌲 服务已启动: http://{config.host}:{config.port}")
    print(f"目录树接口: http://{config.host}:{config.port}/api/tree?root=<目录路径>")
    print(f"文件接口:   http://{config.host}:{config.port}/api/file?path=<文件路径>")
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=config.access_log,
    )
