"""Network Value Object"""
from __future__ import annotations

from dataclasses import dataclass

from .region import Region


@dataclass(frozen=True)
class Network:
    """
    ネットワーク参照（値オブジェクト）

    VPC とサブネットは別のスタックで作成される。
    トポロジー構築はこれを参照するだけで変更しない。
    """

    vpc: str
    region: Region
    public_subnets: tuple[str, ...] = ()
    private_subnets: tuple[str, ...] = ()
