"""
Disjoint path router tests

Greedy K-path construction: order, disjointness, stamping and early stop.
"""

from unittest.mock import Mock

import pytest

from orthopaths.algorithms.base.grid import RoutingGrid
from orthopaths.algorithms.base.layout import WallLayoutGenerator
from orthopaths.algorithms.manhattan.dijkstra import DijkstraPathfinder
from orthopaths.algorithms.manhattan.disjoint_router import DisjointPathRouter
from orthopaths.domain.models.grid import GridPoint, Path
from orthopaths.shared.exceptions import AlgorithmError, RoutingError


def points(*coords):
    return tuple(GridPoint(x, y) for x, y in coords)


@pytest.fixture
def router():
    return DisjointPathRouter()


class TestDisjointPathRouter:
    """Test sequential disjoint routing"""

    def test_three_by_three_finds_two_paths(self, router, open_grid, corner_points):
        """Open 3x3 corner to corner yields exactly two paths"""
        start, end = corner_points

        result = router.route(open_grid, start, end, 5)

        assert result.found_count == 2
        assert not result.is_complete
        assert result.paths[0].points == points((0, 0), (1, 0), (2, 0), (2, 1), (2, 2))
        assert result.paths[1].points == points((0, 0), (0, 1), (1, 1), (1, 2), (2, 2))
        assert result.costs == [4, 4]
        assert result.total_cost == 8

    def test_stamps_interiors_with_path_index(self, router, open_grid, corner_points):
        """Interior cells carry their path index; endpoints stay unstamped"""
        start, end = corner_points

        router.route(open_grid, start, end, 2)

        for point in points((1, 0), (2, 0), (2, 1)):
            assert open_grid.get_occupant(point) == 0
        for point in points((0, 1), (1, 1), (1, 2)):
            assert open_grid.get_occupant(point) == 1
        assert open_grid.get_occupant(start) is None
        assert open_grid.get_occupant(end) is None
        assert open_grid.get_occupant(GridPoint(0, 2)) is None

    def test_request_smaller_than_available(self, router, open_grid, corner_points):
        """Stops after K paths even if more could exist"""
        start, end = corner_points

        result = router.route(open_grid, start, end, 1)

        assert result.found_count == 1
        assert result.is_complete
        assert open_grid.get_occupant(GridPoint(0, 1)) is None

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_returns_nothing(self, router, open_grid, corner_points, count):
        """Zero or negative K performs no searches"""
        start, end = corner_points

        result = router.route(open_grid, start, end, count)

        assert result.paths == []
        assert open_grid.get_statistics()['occupied_cells'] == 0

    def test_isolated_start_returns_empty(self, router, grid_from_rows):
        """No first path means an empty result"""
        grid = grid_from_rows(".#.",
                              "#..",
                              "...")

        result = router.route(grid, GridPoint(0, 0), GridPoint(2, 2), 3)

        assert result.paths == []
        assert not result.is_complete

    def test_adjacent_endpoints_repeat_direct_path(self, router, open_grid):
        """A direct step has no interior, so it is found every time"""
        start, end = GridPoint(0, 0), GridPoint(1, 0)

        result = router.route(open_grid, start, end, 3)

        assert result.found_count == 3
        assert all(path.points == (start, end) for path in result.paths)
        assert result.costs == [1, 1, 1]

    @pytest.mark.parametrize("seed", range(10))
    def test_costs_never_decrease(self, router, seed):
        """Each path costs at least as much as the one before it"""
        grid = RoutingGrid(12, 9, walls=WallLayoutGenerator(0.15, seed=seed).generate(12, 9))
        open_cells = [p for p in grid.iter_points() if not grid.is_wall(p)]
        start, end = open_cells[0], open_cells[-1]

        result = router.route(grid, start, end, 6)

        assert result.costs == sorted(result.costs)

    @pytest.mark.parametrize("seed", range(8))
    def test_paths_are_interior_disjoint(self, router, seed):
        """No interior cell is shared and none touches an endpoint"""
        grid = RoutingGrid(10, 8, walls=WallLayoutGenerator(0.2, seed=seed).generate(10, 8))
        open_cells = [p for p in grid.iter_points() if not grid.is_wall(p)]
        start, end = open_cells[0], open_cells[-1]

        result = router.route(grid, start, end, 5)

        seen = set()
        for path in result.paths:
            assert path.start == start and path.end == end
            assert path.validate_connectivity() == []
            interior = set(path.interior)
            assert not interior & seen
            assert start not in interior and end not in interior
            seen |= interior

        assert result.costs == sorted(result.costs)

    def test_stops_at_first_failure(self, open_grid, corner_points):
        """A not-found search ends the run without further searches"""
        start, end = corner_points
        pathfinder = Mock(spec=DijkstraPathfinder)
        pathfinder.find_path.side_effect = [
            Path(points=points((0, 0), (1, 0), (2, 0), (2, 1), (2, 2)), cost=4),
            Path.not_found(),
        ]

        result = DisjointPathRouter(pathfinder).route(open_grid, start, end, 5)

        assert result.found_count == 1
        assert pathfinder.find_path.call_count == 2

    def test_broken_path_raises(self, open_grid, corner_points):
        """A disconnected path from the pathfinder is an algorithm error"""
        start, end = corner_points
        pathfinder = Mock(spec=DijkstraPathfinder)
        pathfinder.find_path.return_value = Path(points=points((0, 0), (2, 2)), cost=1)

        with pytest.raises(AlgorithmError) as exc_info:
            DisjointPathRouter(pathfinder).route(open_grid, start, end, 2)

        assert isinstance(exc_info.value, RoutingError)
        assert exc_info.value.path_index == 0
        assert exc_info.value.algorithm_name == "dijkstra"

    def test_result_serializes(self, router, open_grid, corner_points):
        """to_dict carries endpoints, counts and paths"""
        start, end = corner_points

        data = router.route(open_grid, start, end, 5).to_dict()

        assert data["start"] == [0, 0]
        assert data["end"] == [2, 2]
        assert data["requested_paths"] == 5
        assert data["found_paths"] == 2
        assert len(data["paths"]) == 2
        assert data["elapsed_seconds"] >= 0.0


class TestRouterWithRealPathfinder:
    """Test that the router and pathfinder agree on grid state"""

    def test_second_run_without_reset_finds_nothing(self, open_grid, corner_points):
        """Stamps persist, so a repeat run on the same grid is blocked"""
        start, end = corner_points
        router = DisjointPathRouter(DijkstraPathfinder())
        router.route(open_grid, start, end, 5)

        assert router.route(open_grid, start, end, 5).paths == []

    def test_reset_allows_identical_rerun(self, open_grid, corner_points):
        """After reset the same paths are found again"""
        start, end = corner_points
        router = DisjointPathRouter()
        first = router.route(open_grid, start, end, 5)

        open_grid.reset()
        second = router.route(open_grid, start, end, 5)

        assert [p.points for p in first.paths] == [p.points for p in second.paths]
