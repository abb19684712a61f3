import logging

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi_mcp import FastApiMCP

from config.logging_config import setup_logging
from config.middleware_config import setup_middleware
from pharmacy.errors import handle_pharmacy_lookup_error
from pharmacy.exceptions import PharmacyLookupError
from router import api_router

logger = logging.getLogger(__name__)
load_dotenv()


def create_app() -> FastAPI:
    app = FastAPI(title="pharmacy lookup")
    app.include_router(api_router)
    app.add_exception_handler(PharmacyLookupError, handle_pharmacy_lookup_error)
    setup_middleware(app)
    return app


app = create_app()
setup_logging()

# Add MCP server to the FastAPI app
mcp = FastApiMCP(
    app,
    name="pharmacy lookup mcp",
    description="공공데이터포털 약국 조회 API 를 mcp 도구로 제공",
    describe_full_response_schema=True,
    describe_all_responses=True,
    http_client=httpx.AsyncClient(timeout=20, base_url="http://localhost:30003"),
    include_operations=["get_pharmacy_list"],
)

# Mount the MCP server to the FastAPI app
mcp.mount_http()

if __name__ == "__main__":
    import uvicorn
    print("약국 조회 서버를 http://localhost:30003 에서 실행 중입니다.")
    print("MCP 엔드포인트: http://localhost:30003/mcp")

    uvicorn.run(app, host="0.0.0.0", port=30003)
