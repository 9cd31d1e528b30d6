from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from utils import to_display_text

@dataclass
class FileNode:
    """
    数据类，用于表示本地文件系统快照中的一个节点（文件或目录）。
    每次请求都会重新构建，不做缓存，也不在请求之间共享。
    """
    # 文件或目录名 (路径的最后一段)
    name: str
    # 节点的完整路径 (调用方传入的路径, 或由父路径拼接而成)
    path: str
    # 是否为目录
    is_dir: bool
    # 子节点列表, 只有目录才会有; 在添加第一个子节点之前为 None
    children: Optional[List['FileNode']] = None

    def add_child(self, child: 'FileNode') -> None:
        if not self.is_dir:
            raise ValueError(f"文件节点不能包含子节点: {self.path}")
        if self.children is None:
            self.children = []
        self.children.append(child)

    def _fields_dict(self) -> Dict[str, Any]:
        return {
            "name": to_display_text(self.name),
            "path": to_display_text(self.path),
            "isDir": self.is_dir,
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为可直接 JSON 序列化的字典。

        没有子节点时省略 children 字段 (而不是输出空列表)，
        文件节点和空目录的输出形状因此保持一致。
        非 UTF-8 的文件名中无法解码的字节会被替换为 U+FFFD。
        使用显式栈遍历，目录层级再深也不会触发递归上限。
        """
        root_data = self._fields_dict()
        stack = [(self, root_data)]
        while stack:
            node, data = stack.pop()
            if not node.children:
                continue
            data["children"] = []
            for child in node.children:
                child_data = child._fields_dict()
                data["children"].append(child_data)
                stack.append((child, child_data))
        return root_data
