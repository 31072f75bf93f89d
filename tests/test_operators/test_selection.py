import numpy as np
import pytest

from hydrodispatch import Generation, Selection


@pytest.fixture
def population(tres_marias, rng):
    return Generation(tres_marias.turbines, rng=rng).random_many(40)


def total_flow(dist) -> float:
    return dist.total_flow


class TestSurvivors:
    def test_keeps_top_n(self, population, rng):
        selection = Selection(fitness=total_flow, max_population=10, rng=rng)
        survivors = selection.survivors(population)
        assert len(survivors) == 10
        threshold = sorted((total_flow(d) for d in population), reverse=True)[9]
        assert all(total_flow(d) >= threshold for d in survivors)

    def test_sorted_by_non_increasing_fitness(self, population, rng):
        survivors = Selection(fitness=total_flow, max_population=15, rng=rng).survivors(population)
        scores = [total_flow(d) for d in survivors]
        assert scores == sorted(scores, reverse=True)

    def test_smaller_population_returned_whole(self, population, rng):
        survivors = Selection(fitness=total_flow, max_population=100, rng=rng).survivors(population)
        assert len(survivors) == len(population)

    def test_idempotent(self, population, rng):
        selection = Selection(fitness=total_flow, max_population=10, rng=rng)
        once = selection.survivors(population)
        twice = selection.survivors(once)
        assert [id(d) for d in twice] == [id(d) for d in once]

    def test_with_plant_fitness(self, tres_marias, population, rng):
        tres_marias.target = 320.0
        survivors = Selection(fitness=tres_marias.fitness, max_population=5, rng=rng).survivors(population)
        scores = [tres_marias.fitness(d) for d in survivors]
        assert scores == sorted(scores, reverse=True)
        assert scores[0] == max(tres_marias.fitness(d) for d in population)


class TestParents:
    def test_pool_matches_population_size(self, population, rng):
        parents = Selection(fitness=total_flow, max_population=40, rng=rng).parents(population)
        assert len(parents) == len(population)

    def test_odd_population_size(self, population, rng):
        parents = Selection(fitness=total_flow, max_population=40, rng=rng).parents(population[:7])
        assert len(parents) == 7

    def test_parents_are_population_members(self, population, rng):
        ids = {id(d) for d in population}
        parents = Selection(fitness=total_flow, max_population=40, rng=rng).parents(population)
        assert all(id(p) in ids for p in parents)

    def test_tournament_over_whole_population_picks_best_two(self, population, rng):
        selection = Selection(fitness=total_flow, max_population=40, tournament_size=40, rng=rng)
        winners = selection.tournament(population)
        ranked = sorted(population, key=total_flow, reverse=True)
        assert winners == ranked[:2]

    def test_small_population_uses_whole_group(self, population, rng):
        selection = Selection(fitness=total_flow, max_population=5, rng=rng)
        winners = selection.tournament(population[:5])
        ranked = sorted(population[:5], key=total_flow, reverse=True)
        assert winners == ranked[:2]

    def test_individuals_can_be_reselected(self, population):
        selection = Selection(fitness=total_flow, max_population=40, rng=np.random.default_rng(3))
        parents = selection.parents(population[:20])
        # group covers the whole population, so the same two win every round
        assert len({id(p) for p in parents}) == 2

    def test_empty_population(self, rng):
        assert Selection(fitness=total_flow, max_population=5, rng=rng).parents([]) == []


class TestSelectionInit:
    def test_max_population_must_be_positive(self):
        with pytest.raises(ValueError, match="max_population must be at least 1"):
            Selection(fitness=total_flow, max_population=0)

    def test_winners_cannot_exceed_group(self):
        with pytest.raises(ValueError, match="n_winners must lie in"):
            Selection(fitness=total_flow, max_population=5, tournament_size=2, n_winners=3)
