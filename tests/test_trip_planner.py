"""Tests for the route solver adapter, the trip planner service and the container."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tubeplanner.adapters.graph import CSVNetworkRepository, DijkstraRouteSolver
from tubeplanner.adapters.rendering import TextDirectionsRenderer
from tubeplanner.config import AppConfig, GraphConfig
import tubeplanner.adapters.graph.dijkstra_solver as solver_module
import tubeplanner.container as container_module
from tubeplanner.container import Container, get_container, reset_container
from tubeplanner.domain.errors import NoRouteFoundError, StationNotFoundError
from tubeplanner.domain.models import LinkKind, RailLink, RouteResult
from tubeplanner.graph import build_graph, shortest_route
from tubeplanner.ports.graph import NetworkRepositoryPort
from tubeplanner.services import TripPlannerService

BUNDLED_DATA = Path(__file__).resolve().parents[1] / "tubeplanner" / "data"


@pytest.fixture
def planner():
    return TripPlannerService(
        network_repository=CSVNetworkRepository(GraphConfig(data_dir=BUNDLED_DATA)),
        route_solver=DijkstraRouteSolver(),
        renderer=TextDirectionsRenderer(),
    )


class TestDijkstraRouteSolver:
    @pytest.fixture
    def graph(self):
        return build_graph(
            [
                RailLink("A", "B", "Red", 2),
                RailLink("C", "D", "Blue", 2),
            ]
        )

    def test_unknown_departure(self, graph):
        with pytest.raises(StationNotFoundError) as exc_info:
            DijkstraRouteSolver().solve(graph, "Nowhere", "A")
        assert exc_info.value.role == "initial"
        assert exc_info.value.message == "Nowhere is not a valid initial station"

    def test_unknown_arrival(self, graph):
        with pytest.raises(StationNotFoundError) as exc_info:
            DijkstraRouteSolver().solve(graph, "A", "Nowhere")
        assert exc_info.value.role == "destination"
        assert exc_info.value.station_name == "Nowhere"

    def test_unknown_station_is_reported_even_when_names_match(self, graph):
        with pytest.raises(StationNotFoundError):
            DijkstraRouteSolver().solve(graph, "Nowhere", "Nowhere")

    def test_same_station(self, graph):
        assert DijkstraRouteSolver().solve(graph, "A", "A").is_empty

    def test_disconnected_stations(self, graph):
        with pytest.raises(NoRouteFoundError):
            DijkstraRouteSolver().solve(graph, "A", "C")

    def test_solve_delegates_to_shortest_route(self, graph, monkeypatch):
        calls = []

        def recording(*args):
            calls.append(args)
            return shortest_route(*args)

        monkeypatch.setattr(solver_module, "shortest_route", recording)
        route = DijkstraRouteSolver().solve(graph, "A", "B")

        assert calls == [(graph, "A", "B")]
        assert route.total_minutes == 2

    def test_no_route_is_logged_and_reraised(self, graph, caplog):
        with caplog.at_level("WARNING", logger=solver_module.__name__):
            with pytest.raises(NoRouteFoundError) as exc_info:
                DijkstraRouteSolver().solve(graph, "A", "D")

        assert exc_info.value.departure == "A"
        assert "No route found" in caplog.text


def test_plan_queens_park_to_bond_street(planner):
    route = planner.plan("Queen's Park", "Bond Street")

    assert route.total_minutes == 16
    assert route.kinds == (LinkKind.RAIL,) * 4 + (
        LinkKind.LINE_INTERCHANGE,
        LinkKind.RAIL,
    )


def test_directions_bank_to_tower_hill(planner):
    assert planner.directions("Bank", "Tower Hill").splitlines() == [
        "1) Begin journey at Bank station. (0 minutes)",
        "2) From Bank, interchange on foot to nearby Monument station. (5 minutes)",
        "3) Travel on the District line, through station stops:",
        "- Tower Hill (7 minutes)",
        "4) Reach destination at Tower Hill station. (7 minutes)",
    ]


def test_plan_can_start_on_any_line_at_the_origin(planner):
    # Oxford Circus is served by three lines; only Victoria reaches Warren Street.
    route = planner.plan("Oxford Circus", "Warren Street")

    assert route.total_minutes == 2
    assert route.start.line == "Victoria"
    assert route.transfer_count == 0


def test_plan_is_repeatable(planner):
    first = planner.plan("Notting Hill Gate", "London Bridge")
    planner.plan("Whitechapel", "Queen's Park")
    second = planner.plan("Notting Hill Gate", "London Bridge")

    assert first.total_minutes == second.total_minutes


def test_directions_same_station(planner):
    assert planner.directions("Green Park", "Green Park") == "Already at destination!"


def test_directions_does_not_render_on_failure():
    repository = MagicMock()
    repository.load.return_value = build_graph([RailLink("A", "B", "Red", 1)])
    renderer = MagicMock()
    planner = TripPlannerService(repository, DijkstraRouteSolver(), renderer)

    with pytest.raises(StationNotFoundError):
        planner.directions("A", "Z")
    renderer.render.assert_not_called()


class TestContainer:
    def test_default_container_builds_trip_planner(self):
        config = AppConfig(graph=GraphConfig(data_dir=BUNDLED_DATA))
        container = Container.create_default(config)

        planner = container.resolve(TripPlannerService)

        assert planner is container.resolve(TripPlannerService)
        assert isinstance(planner.route_solver, DijkstraRouteSolver)
        assert planner.plan("Paddington", "Bond Street").total_minutes == 3

    def test_register_override(self):
        container = Container(config=AppConfig())
        fake = MagicMock()
        container.register(NetworkRepositoryPort, lambda: fake)

        assert container.is_registered(NetworkRepositoryPort)
        assert container.resolve(NetworkRepositoryPort) is fake

    def test_unregistered_type_raises(self):
        with pytest.raises(KeyError):
            Container(config=AppConfig()).resolve(RouteResult)

    def test_transient_registration_creates_new_instances(self):
        container = Container(config=AppConfig())
        container.register(TextDirectionsRenderer, TextDirectionsRenderer, singleton=False)

        assert container.resolve(TextDirectionsRenderer) is not container.resolve(
            TextDirectionsRenderer
        )

    def test_reregistering_drops_cached_singleton(self):
        container = Container(config=AppConfig())
        container.register(TextDirectionsRenderer, TextDirectionsRenderer)
        first = container.resolve(TextDirectionsRenderer)
        container.register(TextDirectionsRenderer, TextDirectionsRenderer)

        assert container.resolve(TextDirectionsRenderer) is not first


class TestDefaultContainer:
    @pytest.fixture(autouse=True)
    def fresh_container(self, monkeypatch):
        built = []

        def create_default(config=None):
            container = Container(config=AppConfig())
            built.append(container)
            return container

        reset_container()
        monkeypatch.setattr(Container, "create_default", staticmethod(create_default))
        yield built
        reset_container()

    def test_get_container_builds_once(self, fresh_container):
        assert get_container() is get_container()
        assert len(fresh_container) == 1

    def test_reset_container_forces_rebuild(self, fresh_container):
        first = get_container()
        reset_container()

        assert container_module._default_container is None
        assert get_container() is not first
        assert len(fresh_container) == 2
