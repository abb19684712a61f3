"""
공공데이터포털 XML 응답을 JSON 으로 변환한다.

xml2js 의 ``explicitArray: false`` 와 같은 규칙을 따른다.
- 자식이 없는 태그는 텍스트 값 (비어 있으면 "")
- 자식이 있는 태그는 dict
- 같은 이름의 형제 태그가 여러 개면 문서 순서대로 list
- 속성은 무시
- 자식 태그와 텍스트가 섞인 태그의 텍스트는 버린다 (xml2js 는 "_" 키에 보관)
"""
import logging
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Optional, Union

from pharmacy.exceptions import XmlParseError
from pharmacy.model import PharmacyList

logger = logging.getLogger(__name__)

# <item> 이 하나면 dict, 여러 개면 list 로 파싱된다
OneOrMany = Union[Dict[str, Any], List[Any], str]

ITEMS_PATH = ("response", "body", "items", "item")
RESULT_MSG_PATH = ("response", "header", "resultMsg")


def xml_to_dict(xml_text: Union[str, bytes]) -> Dict[str, Any]:
    # bytes 는 XML 선언의 인코딩대로 ElementTree 가 직접 디코딩한다
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise XmlParseError(f"invalid XML: {e}") from e

    return {root.tag: _element_to_value(root)}


def _element_to_value(element: ET.Element) -> Union[Dict[str, Any], str]:
    children = list(element)
    if not children:
        return (element.text or "").strip()

    result: Dict[str, Any] = {}
    for child in children:
        value = _element_to_value(child)
        if child.tag not in result:
            result[child.tag] = value
        elif isinstance(result[child.tag], list):
            result[child.tag].append(value)
        else:
            result[child.tag] = [result[child.tag], value]
    return result


def _child(node: Any, key: str) -> Optional[Any]:
    # 빈 태그는 "" 로 파싱되므로 dict 가 아니면 하위 경로가 없는 것으로 본다
    if isinstance(node, dict):
        return node.get(key)
    return None


def _follow(tree: Any, path) -> Optional[Any]:
    node = tree
    for key in path:
        node = _child(node, key)
        if node is None:
            return None
    return node


def as_list(value: Optional[OneOrMany]) -> List[Any]:
    """단일 항목이면 1개짜리 list 로 감싸고, list 면 순서를 유지한 채 그대로 반환"""
    if value is None or value == "":
        return []
    if isinstance(value, list):
        # 빈 <item/> 은 "" 로 파싱되므로 제외
        return [v for v in value if v != ""]
    return [value]


def extract_items(tree: Dict[str, Any]) -> PharmacyList:
    items = as_list(_follow(tree, ITEMS_PATH))
    for item in items:
        if not isinstance(item, dict):
            raise XmlParseError(f"item is not a record: {item!r}")
    return items


def extract_result_message(tree: Dict[str, Any]) -> Optional[str]:
    message = _follow(tree, RESULT_MSG_PATH)
    if isinstance(message, str) and message:
        return message
    return None


def normalize_pharmacy_xml(xml_text: Union[str, bytes]) -> PharmacyList:
    tree = xml_to_dict(xml_text)
    pharmacies = extract_items(tree)
    logger.info(f"약국 {len(pharmacies)}건 파싱 완료")
    return pharmacies
