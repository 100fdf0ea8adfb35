import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, model_validator

from easysms.config import settings
from easysms.easy_sms import EasySms
from easysms.exceptions import InvalidArgumentException, NoGatewayAvailableException
from easysms.message import Message, PhoneNumber

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sms", tags=["sms"])

_easy_sms: EasySms | None = None


def get_easy_sms() -> EasySms:
    global _easy_sms
    if _easy_sms is None:
        _easy_sms = EasySms(settings.to_config())
    return _easy_sms


class SendRequest(BaseModel):
    to: str
    idd_code: str | None = None
    content: str | None = None
    template: str | None = None
    data: dict[str, Any] | list[Any] | None = None
    gateways: list[str] | None = None

    @model_validator(mode="after")
    def check_content_or_template(self):
        if self.content is None and self.template is None:
            raise ValueError("either content or template is required")
        return self


class GatewayResultResponse(BaseModel):
    gateway: str
    status: str
    result: dict | None = None
    code: int | str | None = None
    message: str | None = None
    raw_response: dict | None = None


class SendResponse(BaseModel):
    ok: bool
    results: list[GatewayResultResponse]


@router.post("", response_model=SendResponse)
def send_sms(req: SendRequest, easy_sms: EasySms = Depends(get_easy_sms)):
    try:
        to = PhoneNumber.parse(req.to, req.idd_code)
        message = Message(content=req.content, template=req.template, data=req.data)
        results = easy_sms.send(to, message, req.gateways or None)
    except InvalidArgumentException as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NoGatewayAvailableException as e:
        logger.error("SMS send failed on every gateway: %s", list(e.results))
        body = SendResponse(
            ok=False,
            results=[GatewayResultResponse(**r.to_dict()) for r in e.results.values()],
        )
        return JSONResponse(status_code=502, content=body.model_dump())

    return SendResponse(
        ok=True,
        results=[GatewayResultResponse(**r.to_dict()) for r in results.values()],
    )
