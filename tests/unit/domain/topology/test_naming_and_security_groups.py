"""Naming Convention / Security Group Composition Unit Tests"""
from ecs_topology.domain.topology import naming
from ecs_topology.domain.topology.security_groups import (
    HTTP_INGRESS,
    IngressRule,
    application_ingress,
    cluster_ingress,
)


class TestNaming:
    """リソース名導出のテスト"""

    def test_cluster_level_names(self):
        """正常: クラスタ共通リソースの名前"""
        assert naming.cluster_name("foo") == "foo-cluster"
        assert naming.instance_role_name("foo") == "foo-instance-role"
        assert naming.instance_profile_name("foo") == "foo-instance-profile"
        assert naming.autoscaling_group_name("foo") == "foo-asg"
        assert naming.cluster_security_group_name("foo") == "foo-cluster-sg"

    def test_application_level_names(self):
        """正常: アプリケーションごとのリソース名"""
        assert naming.load_balancer_name("web") == "web-elb"
        assert naming.container_name("web") == "web-container"
        assert naming.task_family("web") == "web-task"
        assert naming.service_role_name("web") == "web-service-role"
        assert naming.service_name("web") == "web-service"
        assert naming.describe_instance_health_policy_name("web") == "web-describe-instance-health"

    def test_same_input_same_name(self):
        """正常: 同じ入力からは常に同じ名前"""
        assert naming.resource_name("a", "b") == naming.resource_name("a", "b") == "a-b"


class TestSecurityGroupComposition:
    """インバウンドルール構成のテスト"""

    def test_cluster_ingress_with_two_ports(self):
        """正常: HTTP + 各アプリのポート"""
        rules = cluster_ingress([8080, 9090])

        assert rules == (HTTP_INGRESS, IngressRule.tcp(8080), IngressRule.tcp(9090))
        assert [r.from_port for r in rules] == [80, 8080, 9090]
        assert all(r.cidr_blocks == ("0.0.0.0/0",) for r in rules)

    def test_cluster_ingress_keeps_duplicate_ports(self):
        """正常: 同じポートは重複したまま残る"""
        rules = cluster_ingress([8000, 8000])

        assert len(rules) == 3

    def test_cluster_ingress_without_apps(self):
        """正常: アプリがなければ HTTP のみ"""
        assert cluster_ingress([]) == (HTTP_INGRESS,)

    def test_application_ingress(self):
        """正常: アプリ用は常に2ルール"""
        rules = application_ingress(9000)

        assert len(rules) == 2
        assert rules[0].from_port == 80
        assert rules[1] == IngressRule(protocol="tcp", from_port=9000, to_port=9000)
