import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from pharmacy.exceptions import (
    FETCH_FAILED_MESSAGE,
    MALFORMED_RESPONSE_MESSAGE,
    UNKNOWN_API_ERROR_MESSAGE,
    PharmacyLookupError,
    UpstreamError,
    XmlParseError,
)
from pharmacy.xml_parser import extract_result_message, xml_to_dict

logger = logging.getLogger(__name__)


def translate_upstream_error(error: UpstreamError) -> PharmacyLookupError:
    """
    공공데이터포털 호출 실패를 클라이언트 응답용 오류로 변환한다.

    에러 응답 본문도 XML 이면 response.header.resultMsg 를 꺼내
    업스트림 상태 코드와 함께 전달한다.
    """
    if not error.body:
        return UpstreamError(FETCH_FAILED_MESSAGE)

    logger.error(f"Error Response XML: {error.body[:500]}")
    try:
        error_tree = xml_to_dict(error.body)
    except XmlParseError as e:
        logger.error(f"Error parsing API error response (likely non-XML): {e}")
        return UpstreamError(MALFORMED_RESPONSE_MESSAGE, body=error.body)

    error_message = extract_result_message(error_tree) or UNKNOWN_API_ERROR_MESSAGE
    logger.error(f"Detailed API Error Response: {error_message}")
    return UpstreamError(
        f"API 응답 오류: {error_message}",
        status_code=error.upstream_status or status.HTTP_500_INTERNAL_SERVER_ERROR,
        upstream_status=error.upstream_status,
        body=error.body,
    )


async def handle_pharmacy_lookup_error(request: Request, exc: PharmacyLookupError) -> JSONResponse:
    logger.warning(f"약국 조회 실패 ({exc.status_code}): {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
