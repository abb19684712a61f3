import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from config.settings import PharmacySettings, get_service_key, get_settings
from pharmacy.model import ErrorResponse, PharmacyList
from service.pharmacy_service import lookup_pharmacies

logger = logging.getLogger(__name__)
router = APIRouter(
    tags=["Pharmacy Router"]
)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "필수 검색 조건 누락"},
    500: {"model": ErrorResponse, "description": "서버 설정 오류 또는 공공데이터포털 응답 오류"},
}


@router.get(
    "/pharmacy",
    operation_id="get_pharmacy_list",
    description="시/도, 시/군/구, 요일로 해당 지역의 약국 목록을 조회한다.",
    responses=ERROR_RESPONSES,
)
@router.get("/", include_in_schema=False)
async def get_pharmacy_data(
        region: Optional[str] = Query(None, alias="Q0", description="시/도 (예: 서울특별시)"),
        sub_region: Optional[str] = Query(None, alias="Q1", description="시/군/구 (예: 강남구)"),
        weekday: Optional[str] = Query(None, alias="DG", description="요일 (예: 월, 화, 수, 목, 금, 토, 일, 공휴일 또는 1~8)"),
        service_key: Optional[str] = Depends(get_service_key),
        settings: PharmacySettings = Depends(get_settings),
) -> PharmacyList:
    logger.info("get_pharmacy_list execute")
    return await lookup_pharmacies(service_key, region, sub_region, weekday, settings)
