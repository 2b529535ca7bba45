"""Settings / Wiring / Dry-run Provisioner Unit Tests"""
import pytest

from ecs_topology.application.use_cases.topology import BuildClusterTopologyInput
from ecs_topology.domain.topology import ApplicationInput, DuplicateApplicationNameError, Network, Region
from ecs_topology.infrastructure.config import Settings
from ecs_topology.infrastructure.dependencies import build_cluster_topology_use_case
from ecs_topology.infrastructure.logging import configure_logging
from ecs_topology.infrastructure.provisioning import LoggingTopologyProvisioner


def make_input(*names: str) -> BuildClusterTopologyInput:
    return BuildClusterTopologyInput(
        name="prod",
        network=Network(
            vpc="vpc-1",
            region=Region.EU_WEST_1,
            public_subnets=("pub-1",),
            private_subnets=("priv-1",),
        ),
        apps=[ApplicationInput(name=n, image="img", log_group_name="lg") for n in names],
    )


class TestSettings:
    """設定のテスト"""

    def test_defaults(self, monkeypatch):
        """正常: デフォルト値"""
        monkeypatch.delenv("TOPOLOGY_INSTANCE_TYPE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.instance_type == "t2.micro"
        assert settings.reject_duplicate_app_names is True
        assert settings.is_development is True

    def test_environment_variables(self, monkeypatch):
        """正常: 環境変数から読み込む"""
        monkeypatch.setenv("TOPOLOGY_INSTANCE_TYPE", "c5.large")
        monkeypatch.setenv("TOPOLOGY_REJECT_DUPLICATE_APP_NAMES", "false")
        monkeypatch.setenv("TOPOLOGY_ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.instance_type == "c5.large"
        assert settings.reject_duplicate_app_names is False
        assert settings.is_production is True


class TestWiring:
    """設定からのユースケース生成のテスト"""

    def test_settings_are_applied(self):
        """正常: 設定値がユースケースに反映される"""
        settings = Settings(_env_file=None, instance_type="m5.xlarge", reject_duplicate_app_names=False)
        use_case = build_cluster_topology_use_case(settings=settings)

        topology = use_case.execute(make_input("web", "web"))

        assert topology.launch_configuration.instance_type == "m5.xlarge"
        assert len(topology.services) == 2

    def test_duplicates_rejected_by_default(self):
        """異常: デフォルト設定では同名アプリを拒否"""
        use_case = build_cluster_topology_use_case(settings=Settings(_env_file=None))

        with pytest.raises(DuplicateApplicationNameError):
            use_case.execute(make_input("web", "web"))


class TestLoggingTopologyProvisioner:
    """ドライラン Provisioner のテスト"""

    def test_records_every_resource(self):
        """正常: 全リソースを記録する"""
        # Arrange
        configure_logging("WARNING")
        provisioner = LoggingTopologyProvisioner()
        use_case = build_cluster_topology_use_case(
            provisioner=provisioner, settings=Settings(_env_file=None)
        )

        # Act
        use_case.execute(make_input("web", "api"))

        # Assert
        assert len(provisioner.resources) == 6 + 2 * 5
        assert provisioner.resources[:2] == [
            ("security_group", "prod-cluster-sg"),
            ("cluster", "prod-cluster"),
        ]
        assert ("ecs_service", "api-service") in provisioner.resources
