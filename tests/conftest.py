import logging
import os

import pytest

from wikibase_datamodel import Datamodel, ObjectFactory
from wikibase_datamodel.config import settings


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    log_level_str = os.getenv("TEST_LOG_LEVEL", settings.log_level)
    log_level = logging.DEBUG if log_level_str == 'DEBUG' else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True
    )


@pytest.fixture
def factory() -> ObjectFactory:
    return ObjectFactory()


@pytest.fixture
def dm(factory: ObjectFactory) -> Datamodel:
    """Convenience layer bound to the default factory"""
    return Datamodel(factory)
