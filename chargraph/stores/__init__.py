from chargraph.stores.characters import CharacterMetadataStore
from chargraph.stores.relationships import RelationshipStore

__all__ = ["CharacterMetadataStore", "RelationshipStore"]
