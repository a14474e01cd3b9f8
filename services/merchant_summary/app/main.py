import logging

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from api.routes.summary import router as summary_router
from core.config import *
from core.errors import SummaryError, request_validation_handler, summary_error_handler
from core.logging_config import configure_logging
from db.store import DocumentStore, SqlDocumentStore

logger = logging.getLogger(__name__)


def create_document_store(backend: str) -> DocumentStore:
    if backend == "couchbase":
        from db.couchbase_store import connect_couchbase

        return connect_couchbase(
            host=COUCHBASE_HOST,
            username=COUCHBASE_USERNAME,
            password=COUCHBASE_PASSWORD,
            bucket_name=COUCHBASE_BUCKET,
            scope_name=COUCHBASE_SCOPE,
            collection_name=COUCHBASE_COLLECTION,
            ready_timeout=COUCHBASE_READY_TIMEOUT,
        )

    if backend == "sql":
        from db.database import create_db_engine, init_db

        engine = create_db_engine(SUMMARY_DB_DSN)
        init_db(engine)
        return SqlDocumentStore(engine)

    raise RuntimeError(f"Unknown DOCUMENT_STORE_BACKEND: {backend!r}")


app = FastAPI(title="merchant-summary-service", version="1.0")

app.add_exception_handler(SummaryError, summary_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.on_event("startup")
def on_startup():
    configure_logging(LOG_LEVEL)
    app.state.document_store = create_document_store(DOCUMENT_STORE_BACKEND)
    logger.info("📊 Endpoint: POST http://localhost:%d/api/merchant/summary", SERVER_PORT)


@app.on_event("shutdown")
def on_shutdown():
    store = getattr(app.state, "document_store", None)
    if store is not None:
        store.close()


app.include_router(summary_router)


if __name__ == "__main__":
    configure_logging(LOG_LEVEL)
    logger.info("🚀 Server starting on port %d", SERVER_PORT)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
