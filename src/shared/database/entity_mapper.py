from typing import Dict, Type, Callable, Any


class EntityMapper:
    """Routes domain models to the mapper function that builds their ORM entity."""

    def __init__(self, entity_mappings: Dict[Type, Callable[[Any], Any]]):
        self.entity_mappings = entity_mappings

    def map_to_entity(self, model_instance: Any):
        mapping = self.entity_mappings.get(type(model_instance))
        if mapping is None:
            raise ValueError(f"No entity mapping registered for {type(model_instance).__name__}")
        return mapping(model_instance)
