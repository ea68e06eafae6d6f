"""Demo service that builds the catalog's sample scenes."""
from typing import Callable, Dict, List

from structural_patterns.application.dto import PatternRunDTO
from structural_patterns.domain.base.exceptions import DomainException
from structural_patterns.domain.forest import Forest
from structural_patterns.domain.graphic import CompositeGraphic, Leaf
from structural_patterns.infrastructure.logging.logger import get_logger


class UnknownPatternError(DomainException):
    """Raised when a demo is requested for a pattern the catalog lacks."""

    def __init__(self, pattern: str, available: List[str]):
        super().__init__(
            f"Unknown pattern '{pattern}'. Available: {', '.join(available)}",
            "UNKNOWN_PATTERN",
            {"pattern": pattern, "available": available},
        )


class PatternDemoService:
    """Runs the composite and flyweight demonstrations."""

    def __init__(self):
        self._logger = get_logger(__name__)
        self._demos: Dict[str, Callable[[], PatternRunDTO]] = {
            "composite": self.run_composite,
            "flyweight": self.run_flyweight,
        }

    def available_patterns(self) -> List[str]:
        return list(self._demos)

    def run(self, pattern: str) -> PatternRunDTO:
        demo = self._demos.get(pattern.lower())
        if demo is None:
            raise UnknownPatternError(pattern, self.available_patterns())
        return demo()

    def run_all(self) -> List[PatternRunDTO]:
        return [demo() for demo in self._demos.values()]

    def run_composite(self) -> PatternRunDTO:
        """Two nested groups of circles and rectangles."""
        circle1 = Leaf.circle("Circle 1")
        circle2 = Leaf.circle("Circle 2")
        rectangle1 = Leaf.rectangle("Rectangle 1")

        group1 = CompositeGraphic(name="Group 1")
        group1.add(circle1)
        group1.add(rectangle1)

        group2 = CompositeGraphic(name="Group 2")
        group2.add(circle2)
        group2.add(group1)

        lines = group2.render()
        self._logger.info("Composite demo rendered", lines=len(lines))
        return PatternRunDTO(
            pattern="composite",
            lines=lines,
            stats={"leaves": group2.leaf_count(), "depth": group2.depth()},
        )

    def run_flyweight(self) -> PatternRunDTO:
        """Five trees planted from three shared tree types."""
        forest = Forest()
        forest.plant_tree(1, 2, "Oak", "Green", "Rough")
        forest.plant_tree(3, 4, "Pine", "Dark Green", "Smooth")
        forest.plant_tree(5, 6, "Oak", "Green", "Rough")
        forest.plant_tree(7, 8, "Pine", "Dark Green", "Smooth")
        forest.plant_tree(9, 10, "Birch", "Light Green", "Striped")

        lines = forest.render_all()
        self._logger.info("Flyweight demo rendered", trees=len(forest),
                          tree_types=forest.tree_type_count)
        return PatternRunDTO(
            pattern="flyweight",
            lines=lines,
            stats={"trees": len(forest), "tree_types": forest.tree_type_count},
        )
