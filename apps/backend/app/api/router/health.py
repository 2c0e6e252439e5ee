from fastapi import APIRouter, Request

health_check = APIRouter()


@health_check.get("/health", tags=["health"])
async def ping(request: Request):
    return {"status": "ok", "provider": request.app.state.agent.provider_name}
