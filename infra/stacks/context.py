"""
CDK Context Helpers

`cdk.json` ではリスト、`--context` では JSON 文字列で渡される。
"""
import json
from typing import Any

from constructs import Node


def context_apps(node: Node) -> list[dict[str, Any]]:
    """アプリケーション宣言のリスト"""
    value = node.try_get_context('apps') or []
    if isinstance(value, str):
        value = json.loads(value)
    return list(value)


def context_size(node: Node) -> int | None:
    """クラスタサイズ (未指定なら None)"""
    value = node.try_get_context('cluster_size')
    return int(value) if value is not None else None
