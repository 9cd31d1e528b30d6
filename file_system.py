import os
import stat
from typing import FrozenSet, List, Optional, Tuple

from models import FileNode
from getGlobalLogger import logger

class TreeBuildError(Exception):
    """
    构建目录树时的错误基类。

    Attributes:
        path (str): 出错的路径。
        cause (OSError | None): 底层的系统错误。
    """
    op = "walk"

    def __init__(self, path: str, cause: Optional[OSError] = None):
        self.path = path
        self.cause = cause
        super().__init__(path, cause)

    def __str__(self) -> str:
        # 与 "stat /some/path: No such file or directory" 的格式保持一致
        if self.cause is None:
            return f"{self.op} {self.path}"
        reason = self.cause.strerror or str(self.cause)
        return f"{self.op} {self.path}: {reason}"

class StatError(TreeBuildError):
    # 读取路径元数据失败 (不存在、无权限等)
    op = "stat"

class ReadDirError(TreeBuildError):
    # 枚举目录内容失败
    op = "readdir"

class SymlinkCycleError(TreeBuildError):
    # 目录 (通过符号链接) 指回了当前分支上的某个祖先目录
    op = "cycle"

class FileReadError(Exception):
    """读取文件内容失败。"""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(path, cause)

    def __str__(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"open {self.path}: {reason}"

def _base_name(path: str) -> str:
    # 忽略末尾的路径分隔符: "/tmp/project/" -> "project"
    name = os.path.basename(path.rstrip(os.sep + (os.altsep or "")))
    # 只由分隔符组成的路径 (如 "/") 以自身作为名字
    return name or path

def build_tree(path: str) -> FileNode:
    """
    把 path 处的文件或目录构建成 FileNode 树。

    只有顶层调用的错误会抛出 (StatError / ReadDirError)；
    子节点的错误会被吞掉，该子节点直接从 children 中省略。
    使用显式栈代替递归，目录层级没有上限。

    Args:
        path (str): 要遍历的文件或目录路径，绝对路径或相对路径均可。

    Raises:
        StatError: 无法读取 path 的元数据。
        ReadDirError: path 是目录，但无法枚举其内容。
    """
    root, entries, branch = _open_node(path, frozenset())
    # 待展开的目录: (节点, 目录项, 当前分支上的真实路径)
    stack = [(root, entries, branch)]
    while stack:
        node, entries, branch = stack.pop()
        for entry in entries:
            child_path = os.path.join(node.path, entry)
            try:
                child, child_entries, child_branch = _open_node(child_path, branch)
            except TreeBuildError as e:
                # 单个子节点失败不影响父节点，直接跳过
                logger.debug(f"跳过子节点 {child_path}: {e}")
                continue
            node.add_child(child)
            if child.is_dir:
                stack.append((child, child_entries, child_branch))
    return root

def _open_node(path: str, ancestors: FrozenSet[str]) -> Tuple[FileNode, List[str], FrozenSet[str]]:
    # 读取单个节点: 元数据、环检测、目录项 (文件返回空列表)
    try:
        info = os.stat(path)
    except OSError as e:
        raise StatError(path, e) from e

    is_dir = stat.S_ISDIR(info.st_mode)
    node = FileNode(name=_base_name(path), path=path, is_dir=is_dir)
    if not is_dir:
        return node, [], ancestors

    # 当前分支上已经出现过的真实路径 -> 符号链接环
    real_path = os.path.realpath(path)
    if real_path in ancestors:
        raise SymlinkCycleError(path)

    try:
        # 按名字排序，保证同一目录每次输出的顺序一致
        entries = sorted(os.listdir(path))
    except OSError as e:
        raise ReadDirError(path, e) from e

    return node, entries, ancestors | {real_path}

def read_file(path: str) -> bytes:
    """读取文件的原始字节内容，失败时抛出 FileReadError。"""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FileReadError(path, e) from e
