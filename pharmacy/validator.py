import logging
from typing import Optional

from pharmacy.exceptions import ClientInputError, ConfigurationError
from pharmacy.model import LookupRequest

logger = logging.getLogger(__name__)


def validate_lookup_request(
        service_key: Optional[str],
        q0: Optional[str],
        q1: Optional[str],
        dg: Optional[str],
) -> LookupRequest:
    # API 키 검사가 파라미터 검사보다 먼저
    if not service_key:
        logger.error("API Key is not set in environment variables.")
        raise ConfigurationError()

    if not q0 or not q1 or not dg:
        logger.error("Missing required query parameters: Q0 (sido), Q1 (sigungu), or DG (day).")
        raise ClientInputError()

    return LookupRequest(region=q0, sub_region=q1, weekday=dg)
