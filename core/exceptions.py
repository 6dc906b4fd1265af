"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.

예외 계층 구조:
    ARError (베이스)
    ├── GatewayError (AWS 목록 조회 실패 - 전송/인증/응답 오류)
    ├── ConfigError (설정/자격 증명 관련)
    └── ValidationError (입력 검증)

리소스 레코드 단위의 필드 누락은 예외가 아닙니다.
정규화 단계에서 기본값으로 흡수됩니다.

Usage:
    from core.exceptions import GatewayError

    try:
        resp = ec2.describe_reserved_instances()
    except ClientError as e:
        raise GatewayError.from_exception(
            service="ec2",
            operation="describe_reserved_instances",
            region="us-west-1",
            error=e,
        ) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class ARError(Exception):
    """AWS Reservations 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# Provider Gateway 예외
# =============================================================================


class GatewayError(ARError):
    """AWS 목록 조회 실패

    전송 오류, 인증/권한 오류, 잘못된 최상위 응답을 모두 포함합니다.
    현재 감사 패스에 치명적이며, 분류 전에 호출자에게 그대로 전달됩니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        region: str = "",
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if region:
            message = f"{message} [{region}]"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.region = region
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "region": region,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # ClientError 메시지는 이미 message에 포함됨
        if self.error_code or self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

    @classmethod
    def from_exception(
        cls,
        service: str,
        operation: str,
        error: Exception,
        region: str = "",
    ) -> "GatewayError":
        """botocore 예외로부터 생성

        ClientError는 response에서 Code/Message를 추출하고,
        그 외(BotoCoreError, 잘못된 응답 등)는 원인 예외만 보존합니다.

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            error: 원인 예외
            region: 조회 리전

        Returns:
            GatewayError 인스턴스
        """
        error_code = None
        error_message = None

        response = getattr(error, "response", None)
        if isinstance(response, dict):
            error_info = response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            region=region,
            error_code=error_code,
            error_message=error_message,
            cause=error,
        )


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(ARError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(ARError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
    "UnauthorizedOperation",
}

THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}


def _error_code(error: Exception) -> str:
    if isinstance(error, GatewayError):
        return error.error_code or ""

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code", "")

    return ""


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return _error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    return _error_code(error) in THROTTLING_CODES


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, GatewayError):
        if is_access_denied(error):
            return f"{error} - 권한이 없습니다. IAM 정책을 확인하세요."
        if error.error_code in ("ExpiredToken", "ExpiredTokenException"):
            return f"{error} - 인증 토큰이 만료되었습니다. 다시 로그인하세요."
        if error.error_code in ("InvalidClientTokenId", "AuthFailure"):
            return f"{error} - 잘못된 자격 증명입니다."
        if is_throttling(error):
            return f"{error} - 요청 한도를 초과했습니다. 잠시 후 다시 시도하세요."

    return str(error)
