"""Graph analysis — module index, walker and component index."""

from depcalc.analysis.component_index import ComponentIndex
from depcalc.analysis.dependency_walker import DependencyWalker
from depcalc.analysis.graph_index import GraphIndex

__all__ = ["ComponentIndex", "DependencyWalker", "GraphIndex"]
