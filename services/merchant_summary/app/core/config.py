import os

DOCUMENT_STORE_BACKEND = os.getenv("DOCUMENT_STORE_BACKEND", "couchbase").strip().lower()

COUCHBASE_HOST = os.getenv("COUCHBASE_HOST", "db")
COUCHBASE_USERNAME = os.getenv("COUCHBASE_USERNAME", "admin")
COUCHBASE_PASSWORD = os.getenv("COUCHBASE_PASSWORD", "")
COUCHBASE_BUCKET = os.getenv("COUCHBASE_BUCKET", "ms_demo")
COUCHBASE_SCOPE = os.getenv("COUCHBASE_SCOPE", "merchant")
COUCHBASE_COLLECTION = os.getenv("COUCHBASE_COLLECTION", "summary")
COUCHBASE_READY_TIMEOUT = int(os.getenv("COUCHBASE_READY_TIMEOUT", "10"))

SUMMARY_DB_DSN = os.getenv("SUMMARY_DB_DSN")

SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
