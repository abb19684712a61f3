import logging

logger = logging.getLogger(__name__)

HOLIDAY_LABEL = "공휴일"

WEEKDAY_CODES = {
    "월": "1",
    "화": "2",
    "수": "3",
    "목": "4",
    "금": "5",
    "토": "6",
    "일": "7",
}


def to_weekday_code(label: str, holiday_code: str = "8") -> str:
    """
    요일 이름을 공공데이터포털 DG 코드로 변환한다.
    목록에 없는 값은 에러 없이 원본 그대로 사용한다.
    """
    if label == HOLIDAY_LABEL:
        code = holiday_code
    else:
        code = WEEKDAY_CODES.get(label, label)

    logger.info(f"Original DG from request: {label}")
    logger.info(f"Converted DG for API call: {code}")
    return code
