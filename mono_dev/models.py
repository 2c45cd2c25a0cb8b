"""Data models for mono-dev.

These Pydantic models represent the workspace packages discovered from
manifests and the nodes of the dependency graph built while ordering them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PackageInfo(BaseModel):
    """Metadata for a single package in the monorepo workspace.

    Attributes:
        path: Relative path from workspace root to the package directory.
        version: Current version string from pyproject.toml.
        deps: Internal (workspace) dependency names, in declaration order.
              External deps are not tracked here since only the build
              order between workspace members matters.
    """

    path: str
    version: str
    deps: list[str] = Field(default_factory=list)


class GraphNode(BaseModel):
    """A package in the dependency graph with its outgoing edges.

    Attributes:
        id: Package identifier.
        vertices: Ids this package depends on, in edge insertion order.
    """

    id: str
    vertices: list[str] = Field(default_factory=list)

    @property
    def out_degree(self) -> int:
        return len(self.vertices)
