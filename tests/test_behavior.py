"""Tests for blobworld.blobs — blob records and the per-tick update."""

import numpy as np
import pytest
from numpy.random import Generator

from blobworld.blobs.behavior import advance, candidate_moves, step_blob
from blobworld.blobs.blob import Blob, FoodItem
from blobworld.simulation.state import SimulationState


def _random_state(rng: Generator, size: int, blobs: int, food: int) -> SimulationState:
    coords = [(x, y) for x in range(size) for y in range(size)]
    food_idx = rng.choice(len(coords), size=food, replace=False)
    blob_idx = rng.choice(len(coords), size=blobs, replace=True)
    return SimulationState.from_items(
        food=(FoodItem(*coords[i]) for i in food_idx),
        blobs=(Blob(*coords[i], steps_since_meal=5) for i in blob_idx),
    )


class TestBlob:
    """Tests for the Blob record."""

    def test_defaults(self) -> None:
        blob = Blob(x=1, y=2)
        assert blob.steps_since_meal == 0
        assert blob.position == (1, 2)

    def test_moved_without_food_gets_hungrier(self) -> None:
        blob = Blob(x=1, y=2, steps_since_meal=7)
        moved = blob.moved_to(2, 3, ate=False)
        assert moved == Blob(x=2, y=3, steps_since_meal=8)

    def test_moved_onto_food_is_fed(self) -> None:
        blob = Blob(x=1, y=2, steps_since_meal=7)
        assert blob.moved_to(1, 3, ate=True).steps_since_meal == 0

    def test_fed_keeps_position(self) -> None:
        assert Blob(x=4, y=4, steps_since_meal=9).fed() == Blob(x=4, y=4)


class TestCandidateMoves:
    """Tests for neighbour enumeration."""

    def test_interior_has_eight(self) -> None:
        moves = candidate_moves(5, 5, 10)
        assert len(moves) == 8
        assert (0, 0) not in moves

    def test_corner_has_three(self) -> None:
        assert sorted(candidate_moves(0, 0, 10)) == [(0, 1), (1, 0), (1, 1)]
        assert len(candidate_moves(9, 9, 10)) == 3

    def test_edge_has_five(self) -> None:
        assert len(candidate_moves(0, 5, 10)) == 5
        assert len(candidate_moves(5, 9, 10)) == 5

    def test_no_wraparound(self) -> None:
        for dx, dy in candidate_moves(9, 0, 10):
            assert 0 <= 9 + dx < 10
            assert 0 <= dy


class TestStepBlob:
    """Tests for the single-blob update."""

    def test_eats_in_place(self, rng: Generator) -> None:
        food = {FoodItem(3, 3), FoodItem(3, 4)}
        blob = step_blob(Blob(3, 3, steps_since_meal=40), food, rng, 10)
        assert blob == Blob(3, 3, steps_since_meal=0)
        assert food == {FoodItem(3, 4)}

    def test_moves_towards_adjacent_food(self, rng: Generator) -> None:
        food = {FoodItem(8, 8), FoodItem(2, 3)}
        for _ in range(20):
            remaining = set(food)
            blob = step_blob(Blob(1, 2, steps_since_meal=3), remaining, rng, 10)
            assert blob == Blob(2, 3, steps_since_meal=0)
            assert remaining == {FoodItem(8, 8)}

    def test_chooses_among_several_food_cells(self, rng: Generator) -> None:
        food = {FoodItem(4, 5), FoodItem(6, 5)}
        seen = set()
        for _ in range(60):
            remaining = set(food)
            blob = step_blob(Blob(5, 5), remaining, rng, 10)
            assert blob.position in {(4, 5), (6, 5)}
            assert len(remaining) == 1
            seen.add(blob.position)
        assert seen == {(4, 5), (6, 5)}

    def test_random_move_without_food(self, rng: Generator) -> None:
        seen = set()
        for _ in range(200):
            blob = step_blob(Blob(5, 5, steps_since_meal=2), set(), rng, 10)
            assert max(abs(blob.x - 5), abs(blob.y - 5)) == 1
            assert blob.steps_since_meal == 3
            seen.add(blob.position)
        assert len(seen) == 8

    def test_corner_blob_stays_in_bounds(self, rng: Generator) -> None:
        for _ in range(50):
            blob = step_blob(Blob(0, 0), set(), rng, 10)
            assert blob.position in {(0, 1), (1, 0), (1, 1)}


class TestAdvance:
    """Tests for the whole-state tick transition."""

    def test_blob_steps_south_onto_food(self, rng: Generator) -> None:
        state = SimulationState.from_items(food=[FoodItem(5, 6)], blobs=[Blob(5, 5)])
        nxt = advance(state, rng, grid_size=100)
        assert nxt.blobs == (Blob(5, 6, steps_since_meal=0),)
        assert nxt.food == frozenset()

    def test_hungry_blob_starves(self, rng: Generator) -> None:
        state = SimulationState.from_items(
            food=[FoodItem(50, 50)],
            blobs=[Blob(5, 5, steps_since_meal=99)],
        )
        nxt = advance(state, rng, grid_size=100)
        assert nxt.blobs == ()
        assert nxt.food == state.food

    def test_starvation_after_exactly_limit_ticks(self, rng: Generator) -> None:
        state = SimulationState.from_items(food=[], blobs=[Blob(10, 10)])
        for _ in range(99):
            state = advance(state, rng, grid_size=20)
        assert state.blob_count == 1
        assert state.blobs[0].steps_since_meal == 99
        state = advance(state, rng, grid_size=20)
        assert state.blob_count == 0

    def test_custom_starvation_limit(self, rng: Generator) -> None:
        state = SimulationState.from_items(food=[], blobs=[Blob(3, 3)])
        state = advance(state, rng, grid_size=10, max_steps_without_food=2)
        assert state.blob_count == 1
        state = advance(state, rng, grid_size=10, max_steps_without_food=2)
        assert state.blob_count == 0

    def test_earlier_blob_takes_shared_food(self, rng: Generator) -> None:
        """Blobs are processed in order, so the first claims the food."""
        state = SimulationState.from_items(
            food=[FoodItem(5, 6)],
            blobs=[Blob(5, 5, steps_since_meal=10), Blob(5, 7, steps_since_meal=20)],
        )
        first, second = advance(state, rng, grid_size=10).blobs
        assert first == Blob(5, 6, steps_since_meal=0)
        assert second.steps_since_meal == 21

    def test_blobs_sharing_a_food_cell(self, rng: Generator) -> None:
        state = SimulationState.from_items(
            food=[FoodItem(2, 2)],
            blobs=[Blob(2, 2, steps_since_meal=4), Blob(2, 2, steps_since_meal=4)],
        )
        first, second = advance(state, rng, grid_size=10).blobs
        assert first == Blob(2, 2, steps_since_meal=0)
        assert second.steps_since_meal == 5
        assert second.position != (2, 2)

    def test_input_state_is_untouched(self, rng: Generator) -> None:
        state = _random_state(rng, size=15, blobs=20, food=60)
        food_before = set(state.food)
        blobs_before = list(state.blobs)
        nxt = advance(state, rng, grid_size=15)
        assert nxt is not state
        assert set(state.food) == food_before
        assert list(state.blobs) == blobs_before

    def test_food_conservation(self, rng: Generator) -> None:
        """Every eaten item matches exactly one newly fed blob."""
        for _ in range(20):
            state = _random_state(rng, size=20, blobs=30, food=80)
            nxt = advance(state, rng, grid_size=20)
            eaten = state.food - nxt.food
            assert nxt.food <= state.food
            fed = [b for b in nxt.blobs if b.steps_since_meal == 0]
            assert len(fed) == len(eaten)
            assert {FoodItem(b.x, b.y) for b in fed} == eaten

    def test_movement_bound(self, rng: Generator) -> None:
        state = _random_state(rng, size=12, blobs=25, food=30)
        for _ in range(30):
            nxt = advance(state, rng, grid_size=12)
            assert nxt.blob_count == state.blob_count
            for before, after in zip(state.blobs, nxt.blobs):
                dist = max(abs(after.x - before.x), abs(after.y - before.y))
                if dist == 0:
                    # Only a blob eating where it stands stays put
                    here = FoodItem(before.x, before.y)
                    assert after.steps_since_meal == 0
                    assert here in state.food
                    assert here not in nxt.food
                else:
                    assert dist == 1
                assert 0 <= after.x < 12
                assert 0 <= after.y < 12
            state = nxt

    def test_second_blob_on_eaten_cell_moves_on(self, rng: Generator) -> None:
        """A blob whose food was eaten earlier in the tick steps away."""
        state = SimulationState.from_items(
            food=[FoodItem(3, 3)],
            blobs=[Blob(3, 3, steps_since_meal=5), Blob(3, 3, steps_since_meal=5)],
        )
        first, second = advance(state, rng, grid_size=10).blobs
        assert first == Blob(3, 3, steps_since_meal=0)
        assert max(abs(second.x - 3), abs(second.y - 3)) == 1
        assert second.steps_since_meal == 6

    def test_same_seed_same_outcome(self) -> None:
        start = _random_state(np.random.default_rng(3), size=15, blobs=10, food=20)
        a = advance(start, np.random.default_rng(9), grid_size=15)
        b = advance(start, np.random.default_rng(9), grid_size=15)
        assert a == b

    def test_empty_state(self, rng: Generator) -> None:
        assert advance(SimulationState(), rng, grid_size=5) == SimulationState()


@pytest.mark.parametrize("steps", [0, 50, 98])
def test_survivors_below_limit_are_kept(steps: int, rng: Generator) -> None:
    state = SimulationState.from_items(food=[], blobs=[Blob(4, 4, steps_since_meal=steps)])
    assert advance(state, rng, grid_size=10).blob_count == 1
