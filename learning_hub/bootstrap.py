"""Assembles a CatalogService from configuration."""
import logging
from typing import Optional

import psycopg2
from google.cloud import storage

from learning_hub.components.services.catalog_service import CatalogService
from learning_hub.components.services.object_store import ObjectStoreService
from learning_hub.components.services.orphan_policy import OrphanPolicy
from learning_hub.components.services.user_service import IdentityProvider
from learning_hub.components.services.video_repository import LearningVideoRepository
from learning_hub.core.config.catalog_config import CatalogConfig
from learning_hub.core.config.db_config import DBConfig
from learning_hub.core.config.gcs_config import GCSConfig

logger = logging.getLogger(__name__)


def connect(db_config: DBConfig):
    """Open an autocommit connection to the metadata database."""
    conn = psycopg2.connect(db_config.dsn())
    conn.autocommit = True
    return conn


def build_catalog_service(
    identity: IdentityProvider,
    db_config: Optional[DBConfig] = None,
    gcs_config: Optional[GCSConfig] = None,
    catalog_config: Optional[CatalogConfig] = None,
    conn=None,
    storage_client: Optional[storage.Client] = None,
    orphan_policy: Optional[OrphanPolicy] = None,
) -> CatalogService:
    """Wire the metadata store, the object store and *identity* into a CatalogService.

    A connection or storage client passed in is used as is; otherwise one is
    created from the corresponding config.
    """
    db_config = db_config or DBConfig()
    gcs_config = gcs_config or GCSConfig()
    catalog_config = catalog_config or CatalogConfig()

    owns_connection = conn is None
    if owns_connection:
        conn = connect(db_config)
    try:
        object_store = ObjectStoreService(gcs_config, storage_client)
    except Exception:
        if owns_connection:
            conn.close()
        raise

    logger.info(
        f"Catalog wired to bucket {gcs_config.video_bucket} and database {db_config.dbname}"
    )
    return CatalogService(
        repository=LearningVideoRepository(conn),
        object_store=object_store,
        identity=identity,
        feed=catalog_config.feed,
        external_prefix=catalog_config.external_source_prefix,
        orphan_policy=orphan_policy,
    )
