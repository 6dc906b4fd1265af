"""
tests/plugins/reservations/test_normalize.py - 리소스 정규화 테스트
"""

import pytest

from plugins.reservations.normalize import (
    EC2_ACTIVE_STATES,
    field_bool,
    field_int,
    field_str,
    normalize,
    normalize_all,
    normalize_reserved_ec2,
    normalize_reserved_rds,
    normalize_running_ec2,
    normalize_running_rds,
)
from plugins.reservations.types import (
    EC2GroupKey,
    LifecycleState,
    ListingSource,
    RDSGroupKey,
    ResourceKind,
)


class TestFieldReaders:
    """필드 읽기 기본값 테스트"""

    def test_missing_fields_default(self):
        """누락 필드는 zero value"""
        assert field_str({}, "InstanceType") == ""
        assert field_int({}, "InstanceCount") == 0
        assert field_bool({}, "MultiAZ") is False

    def test_none_fields_default(self):
        """None 값도 zero value"""
        record = {"InstanceType": None, "InstanceCount": None, "MultiAZ": None}
        assert field_str(record, "InstanceType") == ""
        assert field_int(record, "InstanceCount") == 0
        assert field_bool(record, "MultiAZ") is False

    def test_wrong_types_default(self):
        """타입이 맞지 않으면 기본값"""
        record = {"InstanceType": 5, "InstanceCount": "3", "MultiAZ": "true"}
        assert field_str(record, "InstanceType") == ""
        assert field_int(record, "InstanceCount") == 0
        assert field_bool(record, "MultiAZ") is False

    def test_bool_is_not_int(self):
        """bool 값은 정수로 취급하지 않음"""
        assert field_int({"InstanceCount": True}, "InstanceCount") == 0

    def test_non_mapping_record(self):
        """dict가 아닌 레코드"""
        assert field_str(None, "InstanceType") == ""
        assert field_int(["x"], "InstanceCount") == 0
        assert field_bool("record", "MultiAZ") is False


class TestNormalizeRunningEC2:
    """실행 중 EC2 인스턴스 정규화 테스트"""

    def test_vpc_instance(self, records):
        """VpcId가 있으면 VPC"""
        result = normalize_running_ec2(records.ec2_instance("m3.large", vpc_id="vpc-123"))

        assert result.key == EC2GroupKey("m3.large", True)
        assert result.count == 1
        assert result.state is LifecycleState.ACTIVE

    def test_classic_instance(self, records):
        """VpcId가 없으면 VPC 아님"""
        result = normalize_running_ec2(records.ec2_instance("m3.large"))

        assert result.key == EC2GroupKey("m3.large", False)

    def test_empty_vpc_id(self, records):
        """빈 VpcId는 VPC 아님"""
        record = records.ec2_instance("m3.large")
        record["VpcId"] = ""

        assert normalize_running_ec2(record).key.vpc is False

    @pytest.mark.parametrize("state", sorted(EC2_ACTIVE_STATES))
    def test_active_states(self, records, state):
        """pending/running/stopping/stopped/shutting-down은 활성"""
        assert normalize_running_ec2(records.ec2_instance(state=state)).is_active

    @pytest.mark.parametrize("state", ["terminated", "", "rebooting-unknown"])
    def test_inactive_states(self, records, state):
        """그 외 상태는 UNKNOWN"""
        result = normalize_running_ec2(records.ec2_instance(state=state))

        assert result.state is LifecycleState.UNKNOWN
        assert not result.is_active

    def test_missing_state(self):
        """State 누락 시 UNKNOWN"""
        result = normalize_running_ec2({"InstanceType": "t3.micro"})

        assert result.state is LifecycleState.UNKNOWN
        assert result.key == EC2GroupKey("t3.micro", False)

    def test_empty_record(self):
        """빈 레코드도 예외 없이 정규화"""
        result = normalize_running_ec2({})

        assert result.key == EC2GroupKey("", False)
        assert result.count == 1
        assert result.state is LifecycleState.UNKNOWN


class TestNormalizeReservedEC2:
    """EC2 예약 정규화 테스트"""

    def test_vpc_reservation(self, records):
        """ProductDescription에 Amazon VPC가 있으면 VPC"""
        result = normalize_reserved_ec2(records.ec2_reservation("m3.large", count=3, vpc=True))

        assert result.key == EC2GroupKey("m3.large", True)
        assert result.count == 3
        assert result.state is LifecycleState.ACTIVE

    def test_classic_reservation(self, records):
        """Amazon VPC 표기가 없으면 VPC 아님"""
        result = normalize_reserved_ec2(records.ec2_reservation("m3.large", vpc=False))

        assert result.key.vpc is False

    @pytest.mark.parametrize("state", ["retired", "payment-pending", "payment-failed", "Active", ""])
    def test_non_active_reservation(self, records, state):
        """정확히 "active"가 아니면 UNKNOWN"""
        result = normalize_reserved_ec2(records.ec2_reservation(state=state))

        assert result.state is LifecycleState.UNKNOWN

    def test_missing_count(self):
        """InstanceCount 누락 시 0"""
        result = normalize_reserved_ec2({"InstanceType": "m3.large", "State": "active"})

        assert result.count == 0
        assert result.is_active


class TestNormalizeRDS:
    """RDS 정규화 테스트"""

    def test_running_instance(self, records):
        """실행 중 DB 인스턴스는 항상 활성, 개수 1"""
        result = normalize_running_rds(records.db_instance("db.m3.large", engine="postgres", multi_az=True))

        assert result.key == RDSGroupKey("db.m3.large", "postgres", True)
        assert result.count == 1
        assert result.state is LifecycleState.ACTIVE

    def test_running_instance_status_ignored(self, records):
        """DBInstanceStatus와 무관하게 활성"""
        record = records.db_instance()
        record["DBInstanceStatus"] = "stopped"

        assert normalize_running_rds(record).is_active

    def test_reserved_uses_product_description(self, records):
        """예약의 제품은 ProductDescription"""
        record = records.db_reservation("db.r5.large", product="mysql", multi_az=True, count=2)
        record["Engine"] = "ignored"

        result = normalize_reserved_rds(record)

        assert result.key == RDSGroupKey("db.r5.large", "mysql", True)
        assert result.count == 2
        assert result.is_active

    def test_reserved_retired(self, records):
        """retired 예약은 UNKNOWN"""
        result = normalize_reserved_rds(records.db_reservation(state="retired"))

        assert result.state is LifecycleState.UNKNOWN

    def test_missing_multi_az(self):
        """MultiAZ 누락 시 False"""
        result = normalize_running_rds({"DBInstanceClass": "db.t3.micro", "Engine": "mysql"})

        assert result.key.multi_az is False


class TestNormalizeDispatch:
    """종류/출처별 디스패치 테스트"""

    def test_normalize_dispatch(self, records):
        """normalize는 종류/출처에 맞는 함수 사용"""
        ec2 = normalize(records.ec2_reservation(count=4), ResourceKind.EC2, ListingSource.RESERVED)
        rds = normalize(records.db_instance(), ResourceKind.RDS, ListingSource.RUNNING)

        assert isinstance(ec2.key, EC2GroupKey)
        assert ec2.count == 4
        assert isinstance(rds.key, RDSGroupKey)

    def test_normalize_all_preserves_order(self, records):
        """normalize_all은 입력 순서 유지"""
        result = normalize_all(
            [records.ec2_instance("t3.micro"), records.ec2_instance("m5.large")],
            ResourceKind.EC2,
            ListingSource.RUNNING,
        )

        assert [r.key.instance_class for r in result] == ["t3.micro", "m5.large"]

    def test_normalize_all_empty(self):
        """빈 목록"""
        assert normalize_all([], ResourceKind.RDS, ListingSource.RESERVED) == []

    @pytest.mark.parametrize(
        "record",
        [
            {"InstanceType": "m3.large", "State": {"Name": "running"}, "VpcId": "vpc-1"},
            {"DBInstanceClass": "db.m3.large", "ProductDescription": "mysql", "MultiAZ": True, "DBInstanceCount": 2},
            {"InstanceType": None, "State": None, "InstanceCount": None, "MultiAZ": None},
            {},
        ],
    )
    @pytest.mark.parametrize("kind", list(ResourceKind))
    @pytest.mark.parametrize("source", list(ListingSource))
    def test_normalize_is_idempotent(self, record, kind, source):
        """같은 원본 레코드를 두 번 정규화하면 결과 동일"""
        first = normalize(record, kind, source)
        second = normalize(record, kind, source)

        assert first == second
        assert (first.key, first.count, first.state) == (second.key, second.count, second.state)


class TestLifecycleStateStr:
    """LifecycleState 문자열 표현 테스트"""

    def test_str(self):
        assert str(LifecycleState.ACTIVE) == "active"
        assert str(LifecycleState.UNKNOWN) == "unsupported state"
