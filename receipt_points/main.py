from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .config import Settings, load_settings
from .logging import configure_logging
from .service import ReceiptService
from .store import ReceiptStore
from .transport.rest import build_router, install_error_handlers
from .version import package_version

log = logging.getLogger(__name__)


def setup_tracing(app: FastAPI, settings: Settings) -> None:
	if not settings.otlp_endpoint:
		log.info("tracing disabled (no OTLP_ENDPOINT)")
		return

	resource = Resource.create({"service.name": settings.service})
	provider = TracerProvider(resource=resource)
	exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)
	provider.add_span_processor(BatchSpanProcessor(exporter))
	trace.set_tracer_provider(provider)

	FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
	log.info("tracing enabled", extra={"otlp_endpoint": settings.otlp_endpoint})


def create_app(
	settings: Settings | None = None, store: ReceiptStore | None = None
) -> FastAPI:
	settings = settings or load_settings()
	configure_logging(
		service=settings.service, json_mode=settings.json_logs, level=settings.log_level
	)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		log.info("starting service", extra={"version": app.version})
		yield
		log.info("stopping service", extra={"receipts": len(svc.store)})

	app = FastAPI(title=settings.service, version=package_version(), lifespan=lifespan)

	svc = ReceiptService(settings, store=store)
	app.state.service = svc
	app.include_router(build_router(svc))
	install_error_handlers(app)

	# instrumentation adds middleware, which must happen before startup
	setup_tracing(app, settings)
	return app


app = create_app()
