"""Data models for Coverage Sunburst.

Catalog records (``Endpoint``, ``Release``) and user selection (``Filters``)
are the inputs. Everything else here is a derived value rebuilt from scratch
on each recomputation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Union


@dataclass(frozen=True)
class Endpoint:
    """One API endpoint of a release, with its test coverage flags."""

    endpoint: str
    level: str
    category: str
    path: str = ""
    description: str = ""
    tested: bool = False
    conf_tested: bool = False
    k8s_group: str = ""
    k8s_version: str = ""
    k8s_kind: str = ""


@dataclass(frozen=True)
class Release:
    """Endpoint catalog for a single version."""

    release: str = ""
    spec: str = ""
    source: str = ""
    release_date: date = field(default_factory=date.today)
    endpoints: tuple[Endpoint, ...] = ()
    tests: tuple[Any, ...] = ()

    @classmethod
    def placeholder(cls) -> "Release":
        """Empty release used for known versions before their catalog arrives."""
        return cls()


@dataclass(frozen=True)
class Filters:
    """The user's current focus.

    ``level``, ``category`` and ``endpoint`` form a drill-down path; an empty
    string means that step has not been selected.
    """

    version: str = ""
    level: str = ""
    category: str = ""
    endpoint: str = ""
    test_tags: tuple[str, ...] = ()
    useragent: str = ""


class NodeKind(Enum):
    ROOT = "root"
    LEVEL = "level"
    CATEGORY = "category"
    ENDPOINT = "endpoint"


@dataclass(frozen=True)
class LeafNode:
    """Sunburst leaf: one endpoint, weighted 1."""

    name: str
    color: str
    record: Endpoint
    value: int = 1
    kind: NodeKind = NodeKind.ENDPOINT

    @classmethod
    def from_endpoint(cls, endpoint: Endpoint, color: str) -> "LeafNode":
        return cls(name=endpoint.endpoint, color=color, record=endpoint)

    @property
    def tested(self) -> bool:
        return self.record.tested

    @property
    def conf_tested(self) -> bool:
        return self.record.conf_tested


@dataclass(frozen=True)
class BranchNode:
    """Root, level or category node of the sunburst tree."""

    kind: NodeKind
    name: str
    color: str
    level: str = ""
    category: str = ""
    endpoint: str = ""
    children: tuple["SunburstNode", ...] = ()

    def child(self, name: str) -> Optional["SunburstNode"]:
        """Return the first child called ``name``, or None."""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def leaves(self) -> list[LeafNode]:
        """All endpoint leaves below this node, depth-first."""
        found: list[LeafNode] = []
        for node in self.children:
            if isinstance(node, LeafNode):
                found.append(node)
            else:
                found.extend(node.leaves())
        return found


SunburstNode = Union[BranchNode, LeafNode]

# level -> category -> leaves, in first-occurrence order
GroupedEndpoints = dict[str, dict[str, list[LeafNode]]]

Breadcrumb = tuple[str, ...]

# Pointer-hover payloads are ``{"data": {"name": ...}}`` mappings.
HoverNode = Union[Mapping[str, Any], str]
HoverPath = Sequence[HoverNode]


class Depth(str, Enum):
    """How far the breadcrumb has drilled into the tree."""

    ROOT = "root"
    LEVEL = "level"
    CATEGORY = "category"
    ENDPOINT = "endpoint"


@dataclass(frozen=True)
class CoverageSummary:
    """Endpoint counts for the breadcrumb's current scope."""

    total_endpoints: int
    tested_endpoints: int
    conf_tested_endpoints: int


@dataclass(frozen=True)
class EndpointDetail:
    """Display fields of the endpoint in focus.

    The default instance, with every field an empty string, stands for
    "no single endpoint in focus".
    """

    tested: Union[bool, str] = ""
    conf_tested: Union[bool, str] = ""
    endpoint: str = ""
    path: str = ""
    description: str = ""
    group: str = ""
    version: str = ""
    kind: str = ""

    @classmethod
    def from_endpoint(cls, endpoint: Endpoint) -> "EndpointDetail":
        return cls(
            tested=endpoint.tested,
            conf_tested=endpoint.conf_tested,
            endpoint=endpoint.endpoint,
            path=endpoint.path,
            description=endpoint.description,
            group=endpoint.k8s_group,
            version=endpoint.k8s_version,
            kind=endpoint.k8s_kind,
        )

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_DETAIL


EMPTY_DETAIL = EndpointDetail()
