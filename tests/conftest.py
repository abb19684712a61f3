"""Shared fixtures for pharmacy lookup tests."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "pharmacy-lookup-test-logs"))

from config.settings import PharmacySettings, get_service_key, get_settings  # noqa: E402
from main import create_app  # noqa: E402

UPSTREAM_URL = "http://upstream.test/B552657/ErmctInsttInfoInqireService/getParmacyList"
SERVICE_KEY = "test-service-key-1234"

SINGLE_ITEM_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<response>
  <header><resultCode>00</resultCode><resultMsg>NORMAL SERVICE.</resultMsg></header>
  <body>
    <items>
      <item>
        <dutyAddr>서울특별시 강남구 테헤란로 1</dutyAddr>
        <dutyName>온누리약국</dutyName>
        <dutyTel1>02-555-0001</dutyTel1>
      </item>
    </items>
    <numOfRows>10</numOfRows><pageNo>1</pageNo><totalCount>1</totalCount>
  </body>
</response>"""

MULTI_ITEM_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<response>
  <header><resultCode>00</resultCode><resultMsg>NORMAL SERVICE.</resultMsg></header>
  <body>
    <items>
      <item><dutyName>가나약국</dutyName><dutyTel1>02-555-0001</dutyTel1></item>
      <item><dutyName>다라약국</dutyName><dutyTel1>02-555-0002</dutyTel1></item>
      <item><dutyName>마바약국</dutyName><dutyTel1>02-555-0003</dutyTel1></item>
    </items>
    <numOfRows>10</numOfRows><pageNo>1</pageNo><totalCount>3</totalCount>
  </body>
</response>"""

EMPTY_ITEMS_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<response>
  <header><resultCode>00</resultCode><resultMsg>NORMAL SERVICE.</resultMsg></header>
  <body><items/><numOfRows>10</numOfRows><pageNo>1</pageNo><totalCount>0</totalCount></body>
</response>"""

ERROR_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<response>
  <header><resultCode>30</resultCode><resultMsg>SERVICE KEY IS NOT REGISTERED ERROR.</resultMsg></header>
</response>"""


@pytest.fixture
def settings() -> PharmacySettings:
    return PharmacySettings(api_url=UPSTREAM_URL)


@pytest.fixture
def app(settings: PharmacySettings) -> FastAPI:
    """App with the credential and settings injected instead of read from the environment."""
    application = create_app()
    application.dependency_overrides[get_service_key] = lambda: SERVICE_KEY
    application.dependency_overrides[get_settings] = lambda: settings
    return application


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
