from ..values import MediaInfoIdValue
from .base import EntityDocument


class MediaInfoDocument(EntityDocument):
    """Structured data of a media file; carries labels and statements only."""

    entity_id: MediaInfoIdValue
