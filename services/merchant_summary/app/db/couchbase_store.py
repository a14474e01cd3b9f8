# app/db/couchbase_store.py

import logging
from datetime import timedelta
from typing import Any, Dict

from couchbase.auth import PasswordAuthenticator
from couchbase.cluster import Cluster
from couchbase.exceptions import CouchbaseException, DocumentNotFoundException
from couchbase.options import ClusterOptions

from db.store import DocumentNotFound, DocumentStore, DocumentStoreError

logger = logging.getLogger(__name__)


class CouchbaseDocumentStore(DocumentStore):
    def __init__(self, collection, cluster=None):
        self.collection = collection
        self.cluster = cluster

    def get(self, key: str) -> Dict[str, Any]:
        try:
            result = self.collection.get(key)
        except DocumentNotFoundException as e:
            raise DocumentNotFound(key) from e
        except CouchbaseException as e:
            raise DocumentStoreError(f"failed to get document {key}: {e}") from e

        try:
            return result.content_as[dict]
        except (CouchbaseException, ValueError, TypeError) as e:
            raise DocumentStoreError(f"failed to decode document {key}: {e}") from e

    def close(self) -> None:
        if self.cluster is not None:
            self.cluster.close()


def connect_couchbase(
    host: str,
    username: str,
    password: str,
    bucket_name: str,
    scope_name: str,
    collection_name: str,
    ready_timeout: int = 10,
) -> CouchbaseDocumentStore:
    logger.info("🔌 Connecting to Couchbase at %s...", host)

    try:
        cluster = Cluster(
            f"couchbase://{host}",
            ClusterOptions(PasswordAuthenticator(username, password)),
        )
        bucket = cluster.bucket(bucket_name)
        bucket.wait_until_ready(timedelta(seconds=ready_timeout))
    except CouchbaseException as e:
        raise DocumentStoreError(f"bucket {bucket_name} not ready: {e}") from e

    collection = bucket.scope(scope_name).collection(collection_name)

    logger.info("✅ Connected to Couchbase: %s.%s.%s", bucket_name, scope_name, collection_name)
    return CouchbaseDocumentStore(collection, cluster=cluster)
