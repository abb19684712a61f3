from typing import Optional

from fastapi import status

CONFIG_ERROR_MESSAGE = "서버 설정 오류: API 키가 누락되었습니다."
MISSING_PARAMS_MESSAGE = "필수 검색 조건(시/도, 시/군/구, 요일)이 누락되었습니다."
FETCH_FAILED_MESSAGE = "데이터를 불러오는 데 실패했습니다."
MALFORMED_RESPONSE_MESSAGE = "데이터 처리 중 오류 발생: 잘못된 API 응답 형식 또는 네트워크 문제"
UNKNOWN_API_ERROR_MESSAGE = "알 수 없는 API 응답 오류"


class PharmacyLookupError(Exception):
    """
    약국 조회 요청을 종료시키는 오류의 기본 클래스.
    status_code 와 message 가 그대로 클라이언트 응답이 된다.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)

    def to_dict(self):
        return {"message": self.message}


class ConfigurationError(PharmacyLookupError):
    """API 키 미설정"""

    def __init__(self, message: str = CONFIG_ERROR_MESSAGE):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


class ClientInputError(PharmacyLookupError):
    """필수 파라미터 누락"""

    def __init__(self, message: str = MISSING_PARAMS_MESSAGE):
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class UpstreamError(PharmacyLookupError):
    """
    공공데이터포털 호출 실패 또는 응답 형식 오류.

    upstream_status / body 는 원본 응답이 있을 때만 채워진다.
    """

    def __init__(
        self,
        message: str = FETCH_FAILED_MESSAGE,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        upstream_status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(status_code, message)
        self.upstream_status = upstream_status
        self.body = body


class XmlParseError(ValueError):
    pass
