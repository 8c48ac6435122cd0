from __future__ import annotations

from fastapi import APIRouter, Request


router = APIRouter()


@router.get("/health")
async def health(req: Request):
    return {"ok": True, "configured": req.app.state.proxy.configured}
