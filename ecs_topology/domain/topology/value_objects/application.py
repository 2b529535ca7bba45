"""Application Value Object"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

DEFAULT_PORT = 8000
DEFAULT_MEMORY = 256


@dataclass(frozen=True)
class PolicyReference:
    """IAM マネージドポリシー参照"""

    arn: str

    def __str__(self) -> str:
        return self.arn


@dataclass(frozen=True)
class Application:
    """
    アプリケーション（値オブジェクト）

    コンテナ化されたワークロード1つ分の宣言。
    name はリソース名のベースとしてそのまま使われる。
    """

    name: str
    image: str
    log_group_name: str
    port: int = DEFAULT_PORT
    memory: int = DEFAULT_MEMORY
    managed_policies: tuple[PolicyReference, ...] = ()


@dataclass(frozen=True)
class ApplicationInput:
    """アプリケーション宣言の入力DTO（省略可能なフィールドは None）"""

    name: str
    image: str
    log_group_name: str
    port: int | None = None
    memory: int | None = None
    managed_policies: Iterable[PolicyReference | str] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ApplicationInput:
        """辞書から生成 (camelCase / snake_case どちらも可)"""
        policies = data.get("managedPolicies", data.get("managed_policies"))
        if isinstance(policies, str):
            policies = (policies,)
        log_group_name = (
            data["logGroupName"] if "logGroupName" in data else data["log_group_name"]
        )
        return cls(
            name=data["name"],
            image=data["image"],
            log_group_name=log_group_name,
            port=data.get("port"),
            memory=data.get("memory"),
            managed_policies=tuple(policies) if policies is not None else None,
        )


def normalize_application(raw: ApplicationInput) -> Application:
    """省略されたフィールドにデフォルト値を適用する"""
    policies = raw.managed_policies if raw.managed_policies is not None else ()
    return Application(
        name=raw.name,
        image=raw.image,
        log_group_name=raw.log_group_name,
        port=raw.port if raw.port is not None else DEFAULT_PORT,
        memory=raw.memory if raw.memory is not None else DEFAULT_MEMORY,
        managed_policies=tuple(
            p if isinstance(p, PolicyReference) else PolicyReference(p) for p in policies
        ),
    )
