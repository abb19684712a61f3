import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PHARMACY_API_URL = "http://apis.data.go.kr/B552657/ErmctInsttInfoInqireService/getParmacyList"


@dataclass(frozen=True)
class PharmacySettings:
    """공공데이터포털 약국 API 호출 설정"""
    api_url: str = DEFAULT_PHARMACY_API_URL
    page_no: int = 1
    num_of_rows: int = 10
    # 공휴일 코드는 공공데이터포털 문서로 확인되지 않은 값이라 설정으로 분리
    holiday_code: str = "8"
    timeout: Optional[float] = None


def get_settings() -> PharmacySettings:
    timeout = os.getenv("PHARMACY_API_TIMEOUT")
    return PharmacySettings(
        api_url=os.getenv("PHARMACY_API_URL", DEFAULT_PHARMACY_API_URL),
        num_of_rows=int(os.getenv("PHARMACY_NUM_OF_ROWS", "10")),
        holiday_code=os.getenv("PHARMACY_HOLIDAY_CODE", "8"),
        timeout=float(timeout) if timeout else None,
    )


def get_service_key() -> Optional[str]:
    """
    요청마다 환경 변수에서 API 키를 읽는다.
    테스트에서는 app.dependency_overrides 로 주입한다.
    """
    return os.getenv("PHARMACY_API_KEY")
