"""Tests for the CSV network repository."""

from pathlib import Path

import pytest

from tubeplanner.adapters.graph import CSVNetworkRepository
from tubeplanner.config import GraphConfig
from tubeplanner.domain.errors import GraphError
from tubeplanner.domain.models import Interchange, LinkKind, RailLink

BUNDLED_DATA = Path(__file__).resolve().parents[1] / "tubeplanner" / "data"


def write_dataset(data_dir: Path, rail_links: str, interchanges: str) -> GraphConfig:
    (data_dir / "rail_links.csv").write_text(rail_links, encoding="utf-8")
    (data_dir / "interchanges.csv").write_text(interchanges, encoding="utf-8")
    return GraphConfig(data_dir=data_dir)


@pytest.fixture
def bundled_repository():
    return CSVNetworkRepository(GraphConfig(data_dir=BUNDLED_DATA))


def test_bundled_dataset_loads_every_station(bundled_repository):
    graph = bundled_repository.load()

    with (BUNDLED_DATA / "rail_links.csv").open(encoding="utf-8") as f:
        next(f)
        stations = set()
        for line in f:
            if line.strip():
                from_station, to_station = line.split(",")[:2]
                stations.update((from_station, to_station))

    for station in stations:
        assert station in graph
    assert "Queen's Park" in bundled_repository.list_stations()


def test_bundled_dataset_has_both_interchange_kinds(bundled_repository):
    connections = bundled_repository.load_connections()
    kinds = {c.kind for c in connections if isinstance(c, Interchange)}

    assert kinds == {LinkKind.LINE_INTERCHANGE, LinkKind.STATION_INTERCHANGE}
    assert any(isinstance(c, RailLink) for c in connections)


def test_default_config_points_at_bundled_data():
    config = GraphConfig()

    assert config.rail_links_path == config.data_dir / "rail_links.csv"
    assert config.rail_links_path.is_file()
    assert config.interchanges_path.is_file()


def test_load_parses_rows_and_skips_blank_lines(tmp_path):
    config = write_dataset(
        tmp_path,
        "from_station,to_station,line,minutes\nA,B,Red,3\n,,,\nB, C ,Red,4\n",
        "from_station,from_line,to_station,to_line,minutes\nB,Red,B,Blue,2\n",
    )
    repository = CSVNetworkRepository(config)

    connections = repository.load_connections()

    assert connections == [
        RailLink("A", "B", "Red", 3),
        RailLink("B", "C", "Red", 4),
        Interchange("B", "Red", "B", "Blue", 2),
    ]
    assert repository.load().has_vertex("B", "Blue")


def test_load_caches_graph_until_cleared(tmp_path):
    config = write_dataset(
        tmp_path,
        "from_station,to_station,line,minutes\nA,B,Red,3\n",
        "from_station,from_line,to_station,to_line,minutes\n",
    )
    repository = CSVNetworkRepository(config)

    first = repository.load()
    assert repository.load() is first

    repository.clear_cache()
    assert repository.load() is not first
    assert repository.load().has_vertex("A", "Red")


def test_missing_file_raises_graph_error(tmp_path):
    repository = CSVNetworkRepository(GraphConfig(data_dir=tmp_path))

    with pytest.raises(GraphError) as exc_info:
        repository.load()
    assert exc_info.value.file_path == str(tmp_path / "rail_links.csv")
    assert isinstance(exc_info.value.cause, OSError)


def test_missing_column_raises_graph_error(tmp_path):
    config = write_dataset(
        tmp_path,
        "from_station,to_station,minutes\nA,B,3\n",
        "from_station,from_line,to_station,to_line,minutes\n",
    )

    with pytest.raises(GraphError, match="line"):
        CSVNetworkRepository(config).load()


@pytest.mark.parametrize(
    "row",
    ["A,B,Red,soon", "A,B,Red,-1", "A,,Red,2"],
)
def test_invalid_row_raises_graph_error(tmp_path, row):
    config = write_dataset(
        tmp_path,
        f"from_station,to_station,line,minutes\n{row}\n",
        "from_station,from_line,to_station,to_line,minutes\n",
    )

    with pytest.raises(GraphError) as exc_info:
        CSVNetworkRepository(config).load()
    assert "row 2" in exc_info.value.message
    assert isinstance(exc_info.value.cause, ValueError)
