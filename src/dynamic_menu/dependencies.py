"""Environment-driven dependency factory.

Long-lived dependencies are created once and reused across calls within the
same process. ``menu_store_session`` is the scoped alternative for callers
that want the DynamoDB handle released as soon as they are done.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import boto3

from dynamic_menu.observability import configure_logging, setup_observability
from dynamic_menu.repositories.menu_repositories import DynamoDBMenuRepository
from dynamic_menu.services.menu_service import MenuService

logger = logging.getLogger(__name__)

DEFAULT_MENUS_TABLE = "dynamic-menus"

# Module-level caches for process reuse
_dynamodb_resource: Any | None = None
_menu_service: MenuService | None = None


def create_dynamodb_resource() -> Any:
    """Create a DynamoDB resource configured from the environment.

    Returns:
        Boto3 DynamoDB resource configured for environment
    """
    endpoint_url = os.getenv("DYNAMODB_ENDPOINT")
    region = os.getenv("AWS_REGION", "us-east-1")

    if endpoint_url:
        # Local DynamoDB - use environment variables for credentials
        access_key = os.getenv("AWS_ACCESS_KEY_ID")
        secret_key = os.getenv("AWS_SECRET_ACCESS_KEY")
        logger.info(f"Using local DynamoDB at {endpoint_url}")
        return boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
        )

    logger.info(f"Using AWS DynamoDB in region {region}")
    return boto3.resource("dynamodb", region_name=region)


def get_menus_table_name() -> str:
    """Return the configured menus table name.

    Raises:
        ValueError: If DYNAMODB_MENUS_TABLE is set but empty
    """
    table_name = os.getenv("DYNAMODB_MENUS_TABLE", DEFAULT_MENUS_TABLE).strip()
    if not table_name:
        raise ValueError("DYNAMODB_MENUS_TABLE must not be empty")
    return table_name


def get_dynamodb_resource() -> Any:
    """Create or retrieve cached DynamoDB resource.

    Returns:
        Boto3 DynamoDB resource configured for environment
    """
    global _dynamodb_resource

    if _dynamodb_resource is None:
        _dynamodb_resource = create_dynamodb_resource()

    return _dynamodb_resource


def get_menu_service() -> MenuService:
    """Create or retrieve cached menu service.

    Returns:
        Configured MenuService instance
    """
    global _menu_service

    if _menu_service is not None:
        return _menu_service

    repository = DynamoDBMenuRepository(
        dynamodb_resource=get_dynamodb_resource(), table_name=get_menus_table_name()
    )
    _menu_service = MenuService(store=repository)

    logger.info("Menu service initialized")
    return _menu_service


@contextmanager
def menu_store_session(table_name: str | None = None) -> Iterator[DynamoDBMenuRepository]:
    """Open a menu repository on a fresh DynamoDB handle.

    The underlying client is closed when the block exits, whether it exits
    normally or by an exception.

    Args:
        table_name: Table to use (configured table if None)

    Yields:
        DynamoDBMenuRepository bound to the new handle
    """
    resource = create_dynamodb_resource()
    try:
        yield DynamoDBMenuRepository(
            dynamodb_resource=resource, table_name=table_name or get_menus_table_name()
        )
    finally:
        resource.meta.client.close()
        logger.debug("Closed DynamoDB menu store session")


def initialize_environment() -> None:
    """Initialize logging and observability for the process.

    Should be called once at startup.
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))
    setup_observability()
    logger.info("Menu service environment initialized")
