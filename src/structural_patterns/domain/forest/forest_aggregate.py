"""Forest aggregate: many planted trees sharing a few tree types."""
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from structural_patterns.domain.forest.tree_type_factory import TreeTypeFactory
from structural_patterns.domain.forest.value_objects import (
    Coordinates,
    TreeType,
    TreeTypeKey,
)
from structural_patterns.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Tree:
    """A planted tree: its own position plus a reference to a shared type."""
    coordinates: Coordinates
    tree_type: TreeType

    @property
    def x(self) -> Union[int, float]:
        return self.coordinates.x

    @property
    def y(self) -> Union[int, float]:
        return self.coordinates.y

    def render(self) -> str:
        return self.tree_type.render(self.x, self.y)


class Forest:
    """
    Manages planted trees.

    The forest never stores intrinsic state per tree: each plant asks the
    tree type factory for the shared TreeType and records only the
    coordinates. Pass a factory to share tree types between forests;
    otherwise the forest owns a fresh one.
    """

    def __init__(self, tree_factory: Optional[TreeTypeFactory] = None):
        self._trees: List[Tree] = []
        self._tree_factory = tree_factory if tree_factory is not None else TreeTypeFactory()

    @property
    def tree_factory(self) -> TreeTypeFactory:
        return self._tree_factory

    def plant(self, coordinates: Coordinates, key: TreeTypeKey) -> Tree:
        """Plant a tree of the given type at the given position."""
        tree_type = self._tree_factory.get_or_create(key)
        tree = Tree(coordinates=coordinates, tree_type=tree_type)
        self._trees.append(tree)
        logger.debug("Tree planted", tree_type=str(key), x=coordinates.x,
                     y=coordinates.y, trees=len(self._trees))
        return tree

    def plant_tree(self, x: Union[int, float], y: Union[int, float],
                   name: str, color: str, texture: str) -> Tree:
        return self.plant(
            Coordinates(x=x, y=y),
            TreeTypeKey(name=name, color=color, texture=texture)
        )

    def render_all(self) -> List[str]:
        """Render every tree in planting order."""
        return [tree.render() for tree in self._trees]

    @property
    def trees(self) -> Tuple[Tree, ...]:
        return tuple(self._trees)

    @property
    def tree_type_count(self) -> int:
        """Distinct tree types held by this forest's factory."""
        return len(self._tree_factory)

    def __len__(self) -> int:
        return len(self._trees)

    def __repr__(self) -> str:
        return f"Forest(trees={len(self._trees)}, tree_types={self.tree_type_count})"
