import os

import pyperclip

from getGlobalLogger import logger

# 剪贴板内容模板: [文件名]"文件内容"
FILE_CONTENT_TEMPLATE = '[{name}]"{content}"'
# 响应体使用的字节模板, 文件内容原样写回
FILE_CONTENT_TEMPLATE_BYTES = b'[%s]"%s"'

def to_display_text(text: str) -> str:
    """
    把 os.listdir 等返回的文件名转换为可以安全编码为 UTF-8 的文本。

    Linux 允许非 UTF-8 的文件名, Python 会用代理字符 (surrogateescape) 保存
    这些字节; 这里把它们替换为 U+FFFD。
    """
    return os.fsencode(text).decode("utf-8", errors="replace")

def decode_file_content(data: bytes) -> str:
    # 按 UTF-8 解码，无法解码的字节替换为 U+FFFD
    return data.decode("utf-8", errors="replace")

def format_file_content(path, content):
    # 只取路径的最后一段作为文件名
    name = to_display_text(os.path.basename(path))
    return FILE_CONTENT_TEMPLATE.format(name=name, content=content)

def format_file_bytes(path, data: bytes) -> bytes:
    # 与 format_file_content 相同的格式, 但文件名和内容都保留原始字节
    name = os.fsencode(os.path.basename(path))
    return FILE_CONTENT_TEMPLATE_BYTES % (name, data)

def copy_to_clipboard(text) -> bool:
    """
    尽力将文本写入系统剪贴板。

    没有可用的剪贴板 (例如无图形界面的 Linux 上缺少 xclip/xsel)，
    或者剪贴板程序在写入时异常退出，都只记录警告，不向调用方抛出异常。

    Returns:
        bool: 是否写入成功。
    """
    try:
        pyperclip.copy(text)
    except (pyperclip.PyperclipException, OSError, UnicodeError) as e:
        logger.warning(f"写入剪贴板失败: {e}")
        return False
    logger.debug(f"已写入剪贴板 ({len(text)} 个字符)")
    return True
