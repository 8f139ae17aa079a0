"""CSV Network Repository adapter.

Loads the rail links and interchanges that make up the transit network
and builds the graph from them. Adds:
- Configuration injection (paths from config)
- Caching of the built graph
- Typed errors naming the offending file and row
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Connection, Interchange, RailLink
from ...graph.build import build_graph
from ...graph.network import TransitGraph

RAIL_LINK_COLUMNS = ("from_station", "to_station", "line", "minutes")
INTERCHANGE_COLUMNS = ("from_station", "from_line", "to_station", "to_line", "minutes")


@dataclass
class CSVNetworkRepository:
    """Network repository that loads from CSV files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[TransitGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> TransitGraph:
        """Load the transit graph from CSV files.

        Returns:
            The graph built from every rail link and interchange.

        Raises:
            GraphError: If the dataset cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        graph = build_graph(self.load_connections())
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"vertices": len(graph), "edges": graph.edge_count},
        )
        return graph

    def load_connections(self) -> List[Connection]:
        """Read every connection record from the dataset.

        Raises:
            GraphError: If a file is missing or a row is malformed.
        """
        self._logger.debug(
            "Loading connections",
            extra={
                "rail_links_path": str(self.config.rail_links_path),
                "interchanges_path": str(self.config.interchanges_path),
            },
        )
        connections: List[Connection] = []
        connections.extend(
            self._read(self.config.rail_links_path, RAIL_LINK_COLUMNS, self._rail_link)
        )
        connections.extend(
            self._read(
                self.config.interchanges_path, INTERCHANGE_COLUMNS, self._interchange
            )
        )
        return connections

    def list_stations(self) -> Sequence[str]:
        """List all station names, sorted."""
        return self.load().stations()

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")

    def _read(
        self,
        path: Path,
        columns: Sequence[str],
        parse: Callable[[Dict[str, str]], Connection],
    ) -> List[Connection]:
        records: List[Connection] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                missing = [c for c in columns if c not in (reader.fieldnames or ())]
                if missing:
                    raise GraphError(
                        f"Missing columns {', '.join(missing)}",
                        file_path=str(path),
                    )
                for row in reader:
                    cleaned = {c: (row.get(c) or "").strip() for c in columns}
                    if not any(cleaned.values()):
                        continue
                    try:
                        records.append(parse(cleaned))
                    except ValueError as e:
                        raise GraphError(
                            f"Invalid row {reader.line_num} in {path.name}",
                            file_path=str(path),
                            cause=e,
                        )
        except OSError as e:
            raise GraphError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            )

        self._logger.debug(
            "Connections read",
            extra={"path": str(path), "records": len(records)},
        )
        return records

    @staticmethod
    def _rail_link(row: Dict[str, str]) -> RailLink:
        _require(row, RAIL_LINK_COLUMNS[:3])
        return RailLink(
            from_station=row["from_station"],
            to_station=row["to_station"],
            line=row["line"],
            minutes=int(row["minutes"]),
        )

    @staticmethod
    def _interchange(row: Dict[str, str]) -> Interchange:
        _require(row, INTERCHANGE_COLUMNS[:4])
        return Interchange(
            from_station=row["from_station"],
            from_line=row["from_line"],
            to_station=row["to_station"],
            to_line=row["to_line"],
            minutes=int(row["minutes"]),
        )


def _require(row: Dict[str, str], columns: Sequence[str]) -> None:
    empty = [c for c in columns if not row[c]]
    if empty:
        raise ValueError(f"empty value for {', '.join(empty)}")
