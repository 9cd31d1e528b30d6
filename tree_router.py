from typing import Callable, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from file_system import FileReadError, TreeBuildError, build_tree, read_file
from utils import copy_to_clipboard, decode_file_content, format_file_bytes, format_file_content, to_display_text
from getGlobalLogger import logger

router = APIRouter(prefix="/api")

def _noop_clipboard_writer(text: str) -> bool:
    return False

def get_clipboard_writer(request: Request) -> Callable[[str], bool]:
    """
    FastAPI 依赖项，返回写剪贴板的函数。

    配置中关闭剪贴板时返回一个什么都不做的函数。
    """
    config = getattr(request.app.state, "config", None)
    if config is not None and not config.clipboard_enabled:
        return _noop_clipboard_writer
    return copy_to_clipboard

def _error_response(message: str, status_code: int) -> PlainTextResponse:
    # 错误信息以纯文本返回，前端可以直接展示 res.text
    return PlainTextResponse(content=to_display_text(message), status_code=status_code)

@router.get("/tree", summary="递归列出目录树", tags=["Tree"])
def get_tree(request: Request, root: Optional[str] = None):
    """
    返回 root 对应的 FileNode 树 (JSON)。

    - root 缺失或为空: 400
    - 顶层路径无法读取: 500，响应内容为错误信息
    """
    if not root:
        return _error_response("root parameter is required", status.HTTP_400_BAD_REQUEST)

    client_ip = request.client.host if request.client else "-"
    logger.info(f"接收到来自 {client_ip} 的目录树请求: root='{root}'")

    try:
        tree = build_tree(root)
    except TreeBuildError as e:
        logger.info(f"构建目录树失败: {e}")
        return _error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        return JSONResponse(content=tree.to_dict())
    except RecursionError:
        # json 编码器本身是递归的，极深的目录树可能超出解释器的递归上限
        logger.error(f"目录树层级过深，无法编码为 JSON: root='{root}'", exc_info=True)
        return _error_response(
            f"encode {root}: directory tree is too deep to encode as JSON",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

@router.get("/file", summary="读取文件并写入剪贴板", tags=["Tree"])
def get_file(
    request: Request,
    path: Optional[str] = None,
    clipboard_writer: Callable[[str], bool] = Depends(get_clipboard_writer),
):
    """
    读取文件内容，格式化为 [文件名]"内容"，写入剪贴板并返回。

    响应体保留文件的原始字节；写入剪贴板的是按 UTF-8 解码后的文本。
    剪贴板写入失败不会影响响应。
    """
    if not path:
        return _error_response("path parameter is required", status.HTTP_400_BAD_REQUEST)

    client_ip = request.client.host if request.client else "-"
    logger.info(f"接收到来自 {client_ip} 的文件请求: path='{path}'")

    try:
        data = read_file(path)
    except FileReadError as e:
        logger.info(f"读取文件失败: {e}")
        return _error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)

    clipboard_writer(format_file_content(path, decode_file_content(data)))
    return Response(content=format_file_bytes(path, data), media_type="text/plain; charset=utf-8")
