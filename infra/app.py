#!/usr/bin/env python3
"""
CDK Application Entry Point

ECS Platform - EC2 ベースの ECS クラスタとアプリケーションをデプロイ。

Context:
    cluster_name: クラスタ名のベース (default: settings.default_cluster_name)
    region: リージョンコード (default: CDK_DEFAULT_REGION / settings.default_region)
    cluster_size: インスタンス数 (default: アプリ数 + 1)
    apps: アプリケーション宣言のリスト
        [{"name": "web", "image": "nginx", "port": 80, "logGroupName": "web"}]
"""
import os

import aws_cdk as cdk
import structlog

from ecs_topology.domain.topology import Region
from ecs_topology.infrastructure.config import get_settings
from ecs_topology.infrastructure.logging import configure_logging
from infra.stacks.context import context_apps, context_size
from infra.stacks.ecs_platform_stack import EcsPlatformStack

settings = get_settings()
configure_logging(settings.log_level, settings.log_format)
logger = structlog.get_logger()

app = cdk.App()

region_code = (
    app.node.try_get_context('region')
    or os.environ.get('CDK_DEFAULT_REGION')
    or settings.default_region
)

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=region_code,
)

logger.info('cdk_app_starting', region=region_code, environment=settings.environment)

EcsPlatformStack(
    app,
    'EcsPlatformStack',
    env=env,
    region=Region.parse(region_code),
    cluster_name=app.node.try_get_context('cluster_name') or settings.default_cluster_name,
    apps=context_apps(app.node),
    size=context_size(app.node),
    description='ECS Platform - EC2 cluster with per-application services',
)

app.synth()
