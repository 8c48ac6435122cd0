from __future__ import annotations

from fastapi import APIRouter, Request

from gemini_proxy.config import logger
from gemini_proxy.errors import InternalError, MethodNotAllowed, ProxyError
from gemini_proxy.messages import negotiate_locale
from gemini_proxy.proxy import ImageProxy, parse_generate_body


router = APIRouter()

GENERATE_PATH = "/api/generate"

# Every method is routed here so non-POST calls get the JSON 405 body.
_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(GENERATE_PATH, methods=_ALL_METHODS)
async def generate(req: Request):
    if req.method != "POST":
        raise MethodNotAllowed()

    proxy: ImageProxy = req.app.state.proxy
    proxy.check_configured()

    locale = negotiate_locale(req.headers.get("accept-language"), proxy.default_locale)
    try:
        body = await req.json()
        image, prompt = parse_generate_body(body)
        data = await proxy.generate(base64_image=image, prompt=prompt, locale=locale)
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("proxy error: %s: %s", type(e).__name__, e)
        raise InternalError(e)

    return {"data": data}
