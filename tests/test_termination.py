"""Tests for the TerminationEvaluator."""

from bridge_torch.sides import Side
from bridge_torch.termination import TerminationEvaluator, TerminationReason


evaluator = TerminationEvaluator()


class TestSuccess:
    def test_no_actors_is_vacuously_successful(self, registry):
        assert evaluator.is_successful(registry) is True
        assert evaluator.is_final(registry, 2, Side.START) is True

    def test_everyone_at_end_is_success(self, registry):
        registry.add("a", 1, "end")
        registry.add("b", 2, "end")
        assert evaluator.reason(registry, 2, Side.END) is TerminationReason.SUCCESS

    def test_anyone_at_start_is_not_success(self, registry):
        registry.add("a", 1, "end")
        registry.add("b", 2)
        assert evaluator.is_successful(registry) is False
        assert evaluator.is_final(registry, 2, Side.START) is False


class TestDeadlocks:
    def test_capacity_below_two_with_several_at_start(self, registry):
        """Nobody could ever ferry the torch back for the rest."""
        registry.add("a", 1)
        registry.add("b", 2)

        assert evaluator.reason(registry, 1, Side.START) is TerminationReason.CAPACITY_DEADLOCK
        assert evaluator.is_successful(registry) is False

    def test_capacity_below_two_with_single_actor_is_not_final(self, registry):
        registry.add("a", 1)
        assert evaluator.is_final(registry, 1, Side.START) is False

    def test_torch_stranded_at_end(self, registry):
        """Torch at the end with nobody there to bring it back."""
        registry.add("a", 1)
        registry.add("b", 2)

        assert evaluator.reason(registry, 2, Side.END) is TerminationReason.TORCH_STRANDED

    def test_torch_at_end_with_someone_there_continues(self, registry):
        registry.add("a", 1)
        registry.add("b", 2, "end")
        assert evaluator.reason(registry, 2, Side.END) is None
