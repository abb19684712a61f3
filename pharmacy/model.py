# 입력/출력 모델 정의
from typing import Any, Dict, List

from pydantic import BaseModel

PharmacyRecord = Dict[str, Any]
PharmacyList = List[PharmacyRecord]


class LookupRequest(BaseModel):
    region: str  # Q0, 시/도 (예: 서울특별시)
    sub_region: str  # Q1, 시/군/구 (예: 강남구)
    weekday: str  # DG, 요일 코드 또는 요일 이름


class ErrorResponse(BaseModel):
    message: str
