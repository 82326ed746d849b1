class Vocab:
    """Well-known IRIs of the Wikibase data model."""

    SITE_WIKIDATA = "http://www.wikidata.org/entity/"
    SITE_WIKIMEDIA_COMMONS = "http://commons.wikimedia.org/entity/"

    CM_GREGORIAN_PRO = "http://www.wikidata.org/entity/Q1985727"
    CM_JULIAN_PRO = "http://www.wikidata.org/entity/Q1985786"

    GLOBE_EARTH = "http://www.wikidata.org/entity/Q2"
    GLOBE_MOON = "http://www.wikidata.org/entity/Q405"

    DT_ITEM = "http://wikiba.se/ontology#WikibaseItem"
    DT_PROPERTY = "http://wikiba.se/ontology#WikibaseProperty"
    DT_LEXEME = "http://wikiba.se/ontology#WikibaseLexeme"
    DT_FORM = "http://wikiba.se/ontology#WikibaseForm"
    DT_SENSE = "http://wikiba.se/ontology#WikibaseSense"
    DT_MEDIA_INFO = "http://wikiba.se/ontology#WikibaseMediaInfo"
    DT_STRING = "http://wikiba.se/ontology#String"
    DT_EXTERNAL_ID = "http://wikiba.se/ontology#ExternalId"
    DT_URL = "http://wikiba.se/ontology#Url"
    DT_COMMONS_MEDIA = "http://wikiba.se/ontology#CommonsMedia"
    DT_TIME = "http://wikiba.se/ontology#Time"
    DT_GLOBE_COORDINATES = "http://wikiba.se/ontology#GlobeCoordinate"
    DT_QUANTITY = "http://wikiba.se/ontology#Quantity"
    DT_MONOLINGUAL_TEXT = "http://wikiba.se/ontology#MonolingualText"
    DT_MATH = "http://wikiba.se/ontology#Math"
    DT_GEO_SHAPE = "http://wikiba.se/ontology#GeoShape"
    DT_TABULAR_DATA = "http://wikiba.se/ontology#TabularData"
    DT_MUSICAL_NOTATION = "http://wikiba.se/ontology#MusicalNotation"
    DT_ENTITY_SCHEMA = "http://wikiba.se/ontology#EntitySchema"
