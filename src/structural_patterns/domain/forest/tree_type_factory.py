"""Tree type factory - one shared TreeType per name/color/texture."""
from structural_patterns.domain.base.flyweight import FlyweightFactory
from structural_patterns.domain.forest.value_objects import TreeType, TreeTypeKey


class TreeTypeFactory(FlyweightFactory[TreeTypeKey, TreeType]):
    """Creates and shares tree types."""

    def __init__(self):
        super().__init__(TreeType.from_key, name="tree_types")

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        """Return the shared tree type for these attributes."""
        return self.get_or_create(TreeTypeKey(name=name, color=color, texture=texture))
