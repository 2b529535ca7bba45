"""Topology Domain Errors"""
from __future__ import annotations


class TopologyError(Exception):
    """トポロジー構築エラーの基底クラス"""

    pass


class UnsupportedRegionError(TopologyError):
    """マシンイメージが定義されていないリージョン"""

    def __init__(self, region: str):
        self.region = region
        super().__init__(f"Unsupported region: {region}")


class DuplicateApplicationNameError(TopologyError):
    """アプリケーション名の重複"""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(
            f"Duplicate application names: {', '.join(names)}. "
            f"Each application name must be unique within a cluster."
        )


class ResourceNameCollisionError(TopologyError):
    """クラスタ共通リソースとアプリケーションのリソース名の衝突"""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(f"Resource names collide between cluster and applications: {', '.join(names)}")
