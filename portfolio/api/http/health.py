from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    """Проверка, что приложение запущено"""
    return {"status": "ok"}
