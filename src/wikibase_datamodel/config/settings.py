import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from wikibase_datamodel.models.internal_representation.vocab import Vocab

logger = logging.getLogger(__name__)


class DatamodelSettings(BaseSettings):
    default_site_iri: str = Vocab.SITE_WIKIDATA
    media_site_iri: str = Vocab.SITE_WIKIMEDIA_COMMONS
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="WIKIBASE_DATAMODEL_", env_file=".env", extra="ignore"
    )


settings = DatamodelSettings()

logger.debug("=== Settings Debug ===")
logger.debug(f"Default site IRI: {settings.default_site_iri}")
logger.debug(f"Media site IRI: {settings.media_site_iri}")
logger.debug(f"Log level: {settings.log_level}")
logger.debug("=== End Settings Debug ===")
