from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..schemas import PointsResponse, ProcessResponse, Receipt
from ..service import ReceiptService

log = logging.getLogger(__name__)

INVALID_RECEIPT = "Invalid receipt format"
RECEIPT_NOT_FOUND = "Receipt not found"
METHOD_NOT_ALLOWED = "Method not allowed"


def http_error(
	message: str, status: int, headers: dict[str, str] | None = None
) -> PlainTextResponse:
	return PlainTextResponse(message, status_code=status, headers=headers)


def install_error_handlers(app: FastAPI) -> None:
	"""Plain-text bodies for the errors clients of this API can hit."""

	@app.exception_handler(RequestValidationError)
	async def invalid_receipt(
		request: Request, exc: RequestValidationError
	) -> PlainTextResponse:
		log.info(
			"rejected receipt",
			extra={"path": request.url.path, "errors": len(exc.errors())},
		)
		return http_error(INVALID_RECEIPT, 400)

	@app.exception_handler(StarletteHTTPException)
	async def method_not_allowed(
		request: Request, exc: StarletteHTTPException
	) -> Response:
		if exc.status_code == 405:
			return http_error(METHOD_NOT_ALLOWED, 405, exc.headers)
		return await http_exception_handler(request, exc)


def build_router(svc: ReceiptService) -> APIRouter:
	router = APIRouter(prefix="/receipts", tags=["receipts"])

	@router.post(
		"/process",
		response_model=ProcessResponse,
		responses={400: {"description": INVALID_RECEIPT}},
	)
	def process(receipt: Receipt) -> ProcessResponse:
		return ProcessResponse(id=svc.process(receipt))

	@router.get(
		"/{receipt_id:path}/points",
		response_model=PointsResponse,
		responses={404: {"description": RECEIPT_NOT_FOUND}},
	)
	def points(receipt_id: str):
		try:
			return PointsResponse(points=svc.points(receipt_id))
		except KeyError:
			return http_error(RECEIPT_NOT_FOUND, 404)

	return router
