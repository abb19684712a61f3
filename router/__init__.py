from fastapi import APIRouter
from router.pharmacy_router import router as pharmacy_router

api_router = APIRouter()

api_router.include_router(pharmacy_router)
