"""Region Value Object"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from ..errors import UnsupportedRegionError


class Region(str, Enum):
    """AWS リージョン"""

    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    CA_CENTRAL_1 = "ca-central-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_CENTRAL_1 = "eu-central-1"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    AP_SOUTH_1 = "ap-south-1"
    SA_EAST_1 = "sa-east-1"
    CN_NORTH_1 = "cn-north-1"
    US_GOV_WEST_1 = "us-gov-west-1"

    @property
    def display_name(self) -> str:
        """表示用の名前 (例: Us-east-1)"""
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, code: str) -> Region:
        """リージョンコードから生成 (大文字小文字は区別しない)"""
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise UnsupportedRegionError(code) from None


# ECS 最適化 AMI
_REGION_IMAGES: MappingProxyType[Region, str] = MappingProxyType(
    {
        Region.US_EAST_2: "ami-34032e51",
        Region.US_EAST_1: "ami-ec33cc96",
        Region.US_WEST_2: "ami-29f80351",
        Region.US_WEST_1: "ami-d5d0e0b5",
        Region.EU_WEST_2: "ami-eb62708f",
        Region.EU_WEST_1: "ami-13f7226a",
        Region.EU_CENTRAL_1: "ami-40d5672f",
        Region.AP_NORTHEAST_2: "ami-7ee13b10",
        Region.AP_NORTHEAST_1: "ami-21815747",
        Region.AP_SOUTHEAST_2: "ami-4f08e82d",
        Region.AP_SOUTHEAST_1: "ami-99f588fa",
        Region.CA_CENTRAL_1: "ami-9b54edff",
    }
)


def resolve_image(region: Region | str) -> str:
    """
    リージョンのマシンイメージ ID を取得

    テーブルにないリージョンは UnsupportedRegionError。
    フォールバックは行わない。
    """
    if not isinstance(region, Region):
        region = Region.parse(region)

    image_id = _REGION_IMAGES.get(region)
    if image_id is None:
        raise UnsupportedRegionError(region.display_name)
    return image_id


def supported_regions() -> tuple[Region, ...]:
    """イメージが定義されているリージョン一覧"""
    return tuple(_REGION_IMAGES)
