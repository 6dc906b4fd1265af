"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_ec2_client, mock_rds_client):
        # MagicMock 기반 EC2/RDS 클라이언트 (페이지네이터 포함)
        pass

    def test_with_moto(moto_ec2):
        ec2, vpc_id, subnet_id = moto_ec2
"""

import sys
from pathlib import Path
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


TEST_REGION = "us-west-1"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (실제 자격 증명/프로파일 사용 방지)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_RESERVATIONS_DEBUG", raising=False)

    from cli.i18n import set_lang

    set_lang("en")
    yield
    set_lang("ko")


# =============================================================================
# 원본 레코드 팩토리
# =============================================================================


def ec2_instance(instance_type: str = "m3.large", vpc_id: str = "", state: str = "running") -> Dict[str, Any]:
    """DescribeInstances Instance 레코드"""
    record: Dict[str, Any] = {
        "InstanceId": "i-1234567890abcdef0",
        "InstanceType": instance_type,
        "State": {"Code": 16, "Name": state},
    }
    if vpc_id:
        record["VpcId"] = vpc_id
    return record


def ec2_reservation(
    instance_type: str = "m3.large",
    count: int = 1,
    vpc: bool = False,
    state: str = "active",
) -> Dict[str, Any]:
    """DescribeReservedInstances ReservedInstances 레코드"""
    return {
        "ReservedInstancesId": "ri-1234",
        "InstanceType": instance_type,
        "InstanceCount": count,
        "ProductDescription": "Linux/UNIX (Amazon VPC)" if vpc else "Linux/UNIX",
        "State": state,
    }


def db_instance(instance_class: str = "db.m3.large", engine: str = "mysql", multi_az: bool = False) -> Dict[str, Any]:
    """DescribeDBInstances DBInstance 레코드"""
    return {
        "DBInstanceIdentifier": "test-db",
        "DBInstanceClass": instance_class,
        "Engine": engine,
        "MultiAZ": multi_az,
        "DBInstanceStatus": "available",
    }


def db_reservation(
    instance_class: str = "db.m3.large",
    product: str = "mysql",
    multi_az: bool = False,
    count: int = 1,
    state: str = "active",
) -> Dict[str, Any]:
    """DescribeReservedDBInstances ReservedDBInstance 레코드"""
    return {
        "ReservedDBInstanceId": "rdbi-1234",
        "DBInstanceClass": instance_class,
        "ProductDescription": product,
        "MultiAZ": multi_az,
        "DBInstanceCount": count,
        "State": state,
    }


@pytest.fixture
def records():
    """원본 레코드 팩토리 묶음"""

    class Records:
        pass

    factories = Records()
    factories.ec2_instance = ec2_instance
    factories.ec2_reservation = ec2_reservation
    factories.db_instance = db_instance
    factories.db_reservation = db_reservation
    return factories


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


def _paginator(pages: List[Dict[str, Any]]) -> MagicMock:
    paginator = MagicMock()
    paginator.paginate.return_value = pages
    return paginator


@pytest.fixture
def mock_ec2_client():
    """EC2 클라이언트 모킹

    describe_instances 페이지와 describe_reserved_instances 응답은
    테스트에서 set_pages / describe_reserved_instances.return_value로 교체합니다.
    """
    mock_client = MagicMock()
    pages: Dict[str, List[Dict[str, Any]]] = {"describe_instances": [{"Reservations": []}]}

    mock_client.get_paginator.side_effect = lambda name: _paginator(pages[name])
    mock_client.describe_reserved_instances.return_value = {"ReservedInstances": []}
    mock_client.pages = pages

    yield mock_client


@pytest.fixture
def mock_rds_client():
    """RDS 클라이언트 모킹"""
    mock_client = MagicMock()
    pages: Dict[str, List[Dict[str, Any]]] = {
        "describe_db_instances": [{"DBInstances": []}],
        "describe_reserved_db_instances": [{"ReservedDBInstances": []}],
    }

    mock_client.get_paginator.side_effect = lambda name: _paginator(pages[name])
    mock_client.pages = pages

    yield mock_client


@pytest.fixture
def mock_boto3_session(mock_ec2_client, mock_rds_client):
    """서비스 이름에 맞는 클라이언트를 돌려주는 boto3.Session 모킹"""
    mock_session = MagicMock()
    clients = {"ec2": mock_ec2_client, "rds": mock_rds_client}
    mock_session.client.side_effect = lambda service_name, **kwargs: clients[service_name]
    mock_session.region_name = TEST_REGION
    return mock_session


# =============================================================================
# 유틸리티 함수
# =============================================================================


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "TestOperation",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError({"Error": {"Code": error_code, "Message": error_message}}, operation)


@pytest.fixture
def client_error():
    """ClientError 생성 헬퍼 픽스처"""
    return create_mock_client_error


# =============================================================================
# moto 통합
# =============================================================================


@pytest.fixture
def moto_ec2():
    """moto를 사용한 EC2 모킹 (VPC + 서브넷 포함)"""
    import boto3
    import moto

    with moto.mock_aws():
        ec2 = boto3.client("ec2", region_name=TEST_REGION)

        vpc = ec2.create_vpc(CidrBlock="10.0.0.0/16")
        vpc_id = vpc["Vpc"]["VpcId"]

        subnet = ec2.create_subnet(VpcId=vpc_id, CidrBlock="10.0.1.0/24")
        subnet_id = subnet["Subnet"]["SubnetId"]

        yield ec2, vpc_id, subnet_id


@pytest.fixture
def moto_rds():
    """moto를 사용한 RDS 모킹"""
    import boto3
    import moto

    with moto.mock_aws():
        yield boto3.client("rds", region_name=TEST_REGION)
