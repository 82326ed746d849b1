from ..values import DatatypeIdValue, PropertyIdValue
from .base import EntityDocument


class PropertyDocument(EntityDocument):
    entity_id: PropertyIdValue
    datatype: DatatypeIdValue
