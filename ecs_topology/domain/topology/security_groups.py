"""Security Group Ingress Composition"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

ANYWHERE = "0.0.0.0/0"
HTTP_PORT = 80


@dataclass(frozen=True)
class IngressRule:
    """インバウンドルール（値オブジェクト）"""

    protocol: str
    from_port: int
    to_port: int
    cidr_blocks: tuple[str, ...] = (ANYWHERE,)

    @classmethod
    def tcp(cls, port: int) -> IngressRule:
        return cls(protocol="tcp", from_port=port, to_port=port)


@dataclass(frozen=True)
class EgressRule:
    """アウトバウンドルール"""

    protocol: str = "-1"
    from_port: int = 0
    to_port: int = 0
    cidr_blocks: tuple[str, ...] = (ANYWHERE,)


HTTP_INGRESS = IngressRule.tcp(HTTP_PORT)
ALLOW_ALL_EGRESS = EgressRule()


def cluster_ingress(ports: Iterable[int]) -> tuple[IngressRule, ...]:
    """
    クラスタ用インバウンドルール

    HTTP(80) + アプリケーションのポートごとに TCP ルール。
    重複したポートもそのまま残す（連結のみ）。
    """
    return (HTTP_INGRESS, *(IngressRule.tcp(port) for port in ports))


def application_ingress(port: int) -> tuple[IngressRule, IngressRule]:
    """アプリケーション用インバウンドルール (HTTP + 自身のポート)"""
    return (HTTP_INGRESS, IngressRule.tcp(port))
