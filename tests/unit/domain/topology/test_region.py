"""Region Image Resolution Unit Tests"""
import pytest

from ecs_topology.domain.topology import Region, UnsupportedRegionError, resolve_image
from ecs_topology.domain.topology.value_objects import supported_regions


EXPECTED_IMAGES = {
    "Us-east-2": "ami-34032e51",
    "Us-east-1": "ami-ec33cc96",
    "Us-west-2": "ami-29f80351",
    "Us-west-1": "ami-d5d0e0b5",
    "Eu-west-2": "ami-eb62708f",
    "Eu-west-1": "ami-13f7226a",
    "Eu-central-1": "ami-40d5672f",
    "Ap-northeast-2": "ami-7ee13b10",
    "Ap-northeast-1": "ami-21815747",
    "Ap-southeast-2": "ami-4f08e82d",
    "Ap-southeast-1": "ami-99f588fa",
    "Ca-central-1": "ami-9b54edff",
}


class TestResolveImage:
    """リージョン → イメージ ID 解決のテスト"""

    @pytest.mark.parametrize("display_name, image_id", sorted(EXPECTED_IMAGES.items()))
    def test_table_entries(self, display_name: str, image_id: str):
        """正常: テーブルの全エントリを解決できる"""
        assert resolve_image(Region.parse(display_name)) == image_id

    def test_table_has_exactly_twelve_regions(self):
        """正常: サポート対象は12リージョン"""
        regions = supported_regions()

        assert len(regions) == 12
        assert {r.display_name for r in regions} == set(EXPECTED_IMAGES)

    def test_accepts_region_code_string(self):
        """正常: 文字列のリージョンコードも受け付ける"""
        assert resolve_image("eu-central-1") == "ami-40d5672f"

    def test_unsupported_region(self):
        """異常: テーブルにないリージョン"""
        with pytest.raises(UnsupportedRegionError) as exc_info:
            resolve_image(Region.SA_EAST_1)

        assert "Sa-east-1" in str(exc_info.value)
        assert exc_info.value.region == "Sa-east-1"

    def test_unknown_region_code(self):
        """異常: 存在しないリージョンコード"""
        with pytest.raises(UnsupportedRegionError) as exc_info:
            resolve_image("mars-north-1")

        assert "mars-north-1" in str(exc_info.value)


class TestRegion:
    """Region 値オブジェクトのテスト"""

    def test_display_name(self):
        """正常: 表示名は先頭のみ大文字"""
        assert Region.AP_NORTHEAST_1.display_name == "Ap-northeast-1"

    def test_str_is_region_code(self):
        """正常: 文字列化するとリージョンコード"""
        assert str(Region.US_WEST_2) == "us-west-2"

    def test_parse_is_case_insensitive(self):
        """正常: 大文字小文字を区別しない"""
        assert Region.parse("Us-east-1") is Region.US_EAST_1
        assert Region.parse("US-EAST-1") is Region.US_EAST_1
