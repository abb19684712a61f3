import logging
from typing import Optional
from urllib.parse import urlencode

import httpx

from config.settings import PharmacySettings
from pharmacy.errors import translate_upstream_error
from pharmacy.exceptions import MALFORMED_RESPONSE_MESSAGE, UpstreamError, XmlParseError
from pharmacy.model import LookupRequest, PharmacyList
from pharmacy.validator import validate_lookup_request
from pharmacy.weekday import to_weekday_code
from pharmacy.xml_parser import normalize_pharmacy_xml

logger = logging.getLogger(__name__)


def build_query_params(request: LookupRequest, service_key: str, settings: PharmacySettings) -> dict:
    return {
        "ServiceKey": service_key,
        "Q0": request.region,
        "Q1": request.sub_region,
        "DG": request.weekday,
        "pageNo": settings.page_no,
        "numOfRows": settings.num_of_rows,
    }


def masked_url(request: LookupRequest, settings: PharmacySettings) -> str:
    # 로그용 URL, API 키는 *** 로 가린다
    params = build_query_params(request, "***", settings)
    return f"{settings.api_url}?{urlencode(params, safe='*')}"


async def fetch_pharmacy_xml(request: LookupRequest, service_key: str, settings: PharmacySettings) -> str:
    """
    공공데이터포털 약국 목록 API 를 한 번 호출하고 XML 본문을 반환한다.
    재시도는 하지 않는다.
    """
    logger.info(f"Constructed API URL (without key): {masked_url(request, settings)}")
    logger.info(f"API Key length: {len(service_key)}")
    logger.info(f"Q0 (sido): {request.region}, Q1 (sigungu): {request.sub_region}, DG (day): {request.weekday}")

    params = build_query_params(request, service_key, settings)
    timeout = settings.timeout if settings.timeout is not None else httpx.USE_CLIENT_DEFAULT

    # 리다이렉트는 따라간다
    async with httpx.AsyncClient(follow_redirects=True) as client:
        try:
            response = await client.get(settings.api_url, params=params, timeout=timeout)
            response.raise_for_status()  # 4XX, 5XX 에러 발생 시 예외 발생
        except httpx.HTTPStatusError as e:
            logger.error(f"API 호출 오류: {e.response.status_code}")
            if e.response.status_code < 400:
                # Location 이 없어 따라갈 수 없는 3xx
                raise UpstreamError() from e
            raise UpstreamError(
                upstream_status=e.response.status_code,
                body=e.response.text or None,
            ) from e
        except httpx.RequestError as e:
            # 네트워크 관련 에러 처리 (타임아웃, 연결 오류 등)
            logger.error(f"API 호출 중 네트워크 오류 발생: {type(e).__name__}")
            raise UpstreamError() from e

    xml_data = response.text
    logger.debug(f"Received XML data (first 500 chars): {xml_data[:500]}")
    return xml_data


async def lookup_pharmacies(
        service_key: Optional[str],
        q0: Optional[str],
        q1: Optional[str],
        dg: Optional[str],
        settings: PharmacySettings,
) -> PharmacyList:
    lookup_request = validate_lookup_request(service_key, q0, q1, dg)
    lookup_request = lookup_request.model_copy(
        update={"weekday": to_weekday_code(lookup_request.weekday, settings.holiday_code)}
    )

    try:
        xml_data = await fetch_pharmacy_xml(lookup_request, service_key, settings)
    except UpstreamError as e:
        raise translate_upstream_error(e) from e

    try:
        return normalize_pharmacy_xml(xml_data)
    except XmlParseError as e:
        logger.error(f"API 응답 파싱 오류: {e}")
        raise UpstreamError(MALFORMED_RESPONSE_MESSAGE, body=xml_data) from e
