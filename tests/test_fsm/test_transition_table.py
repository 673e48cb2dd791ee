"""
Testes da tabela de transições e da definição declarativa (Machine).

Cobrem: registro, validação de decider, busca first-match, parsing de
`next`, next_state e validate.
"""

from __future__ import annotations

from enum import Enum

import pytest

from statekit import (
    STAY,
    Branch,
    CallableDecider,
    Closure,
    Machine,
    MissingDeciderError,
    NamedDecider,
    NamedMethod,
    StateMachineError,
    TransitionTable,
)
from statekit.transitions import parse_branch, parse_next
from tests.fakes.fake_owner import FAKE_MACHINE


class TestTransitionTableRegistration:
    """Validação de branches/decider no registro."""

    def test_multiple_branches_without_decider_fail(self) -> None:
        table = TransitionTable()
        with pytest.raises(MissingDeciderError):
            table.register_transition("c", "z", [Branch("a"), Branch("b")])
        assert len(table) == 0

    def test_missing_decider_is_value_error_and_library_error(self) -> None:
        assert issubclass(MissingDeciderError, ValueError)
        assert issubclass(MissingDeciderError, StateMachineError)

    def test_single_branch_ignores_decider(self) -> None:
        table = TransitionTable()
        transition = table.register_transition(
            "a", "w", [Branch("b")], decider=NamedDecider("unused")
        )
        assert transition.decider is None
        assert transition.is_branching is False
        assert transition.sole_branch == Branch("b")

    def test_multiple_branches_with_decider_are_kept_in_order(self) -> None:
        table = TransitionTable()
        decider = NamedDecider("pick")
        transition = table.register_transition(
            "c", "w", [Branch("a"), Branch("b")], decider=decider
        )
        assert transition.decider is decider
        assert [b.target for b in transition.branches] == ["a", "b"]
        assert transition.sole_branch is None

    def test_zero_branches_rejected(self) -> None:
        with pytest.raises(ValueError, match="ao menos um branch"):
            TransitionTable().register_transition("a", "w", [])

    def test_non_branch_items_rejected_before_storing(self) -> None:
        table = TransitionTable()
        with pytest.raises(TypeError, match="devem ser Branch"):
            table.register_transition("a", "go", ["b"])  # type: ignore[list-item]
        with pytest.raises(TypeError):
            table.register_transition(
                "a", "go", [Branch("b"), {"state": "c"}], decider=NamedDecider("d")
            )  # type: ignore[list-item]
        assert len(table) == 0

    def test_lookup_returns_first_registered_match(self) -> None:
        table = TransitionTable()
        first = table.register_transition("a", "w", [Branch("b")])
        table.register_transition("a", "w", [Branch("c")])

        assert len(table) == 2
        for _ in range(3):
            assert table.lookup("a", "w") is first
        assert table.lookup("a", "x") is None
        assert table.lookup("z", "w") is None

    def test_iteration_is_read_only_snapshot(self) -> None:
        table = TransitionTable()
        table.register_transition("a", "w", [Branch("b")])
        snapshot = list(table)
        table.register_transition("b", "w", [Branch("a")])
        assert len(snapshot) == 1
        assert [t.state for t in table] == ["a", "b"]


class TestMachineDeclaration:
    """Construção da Machine e estado inicial."""

    def test_states_and_events(self) -> None:
        assert FAKE_MACHINE.states[-1] == "d_state"
        assert FAKE_MACHINE.events[0] == "w_event"
        assert FAKE_MACHINE.default_state is None
        assert FAKE_MACHINE.initial_state == "a_state"

    def test_explicit_default_state(self) -> None:
        machine = Machine(states=["a", "b"], events=["e"], default_state="b")
        assert machine.initial_state == "b"

    def test_default_state_must_be_declared(self) -> None:
        with pytest.raises(ValueError, match="default_state"):
            Machine(states=["a"], events=["e"], default_state="zz")

    def test_reserved_names_cannot_be_states(self) -> None:
        with pytest.raises(ValueError, match="reservados"):
            Machine(states=["a", "stay"], events=["e"])

    def test_no_states_means_no_initial_state(self) -> None:
        assert Machine(states=[], events=[]).initial_state is None

    def test_enum_members_are_canonicalized(self) -> None:
        class Light(Enum):
            RED = 1
            GREEN = 2

        machine = Machine(states=list(Light), events=["tick"], default_state=Light.GREEN)
        assert machine.states == ("RED", "GREEN")
        assert machine.initial_state == "GREEN"

    def test_multiple_actions_without_decider_fail(self) -> None:
        machine = Machine(states=["a", "b", "c"], events=["z"])
        with pytest.raises(MissingDeciderError):
            machine.state_transition(
                "c",
                "z",
                next=[
                    {"state": "a", "action": lambda o, e: None},
                    {"state": "b", "action": lambda o, e: None},
                ],
            )
        assert machine.transitions == ()

    def test_blank_decider_counts_as_missing(self) -> None:
        machine = Machine(states=["a", "b"], events=["z"])
        with pytest.raises(MissingDeciderError):
            machine.state_transition("a", "z", next=["a", "b"], decider="")

    def test_single_item_list_is_single_branch(self) -> None:
        machine = Machine(states=["a", "b"], events=["z"])
        transition = machine.state_transition("a", "z", next=[{"state": "b"}])
        assert transition.branches == (Branch("b"),)
        assert transition.decider is None


class TestNextSpecParsing:
    """Conversão das especificações de branch."""

    def test_identifier_spec(self) -> None:
        assert parse_branch("b_state") == Branch("b_state")
        assert parse_branch(STAY).target == "stay"

    def test_mapping_spec_with_named_method_action(self) -> None:
        branch = parse_branch({"state": "a", "name": "foo", "action": "on_a"})
        assert branch.target == "a"
        assert branch.name == "foo"
        assert branch.action == NamedMethod("on_a")

    def test_mapping_spec_with_closure_action(self) -> None:
        def act(owner: object, event: str) -> None:
            del owner, event

        branch = parse_branch({"state": "a", "action": act})
        assert isinstance(branch.action, Closure)
        assert branch.action.fn is act

    def test_mapping_without_state_rejected(self) -> None:
        with pytest.raises(ValueError, match="state"):
            parse_branch({"name": "foo"})

    def test_mapping_with_unknown_keys_rejected(self) -> None:
        with pytest.raises(ValueError, match="desconhecidas"):
            parse_branch({"state": "a", "target": "b"})

    def test_nested_lists_rejected(self) -> None:
        with pytest.raises(TypeError):
            parse_next([["a", "b"]])

    def test_invalid_action_rejected(self) -> None:
        with pytest.raises(TypeError, match="Ação inválida"):
            parse_branch({"state": "a", "action": 42})

    def test_decider_specs(self) -> None:
        machine = Machine(states=["a", "b"], events=["e", "f"])
        named = machine.state_transition("a", "e", next=["a", "b"], decider="pick")
        assert named.decider == NamedDecider("pick")

        fn = lambda owner, event: "a"  # noqa: E731
        wrapped = machine.state_transition("a", "f", next=["a", "b"], decider=fn)
        assert wrapped.decider == CallableDecider(fn)

    def test_invalid_decider_rejected(self) -> None:
        machine = Machine(states=["a", "b"], events=["e"])
        with pytest.raises(TypeError, match="Decider inválido"):
            machine.state_transition("a", "e", next=["a", "b"], decider=3)


class TestNextStateAndValidation:
    """next_state (sem efeitos) e validate."""

    def test_next_states(self) -> None:
        assert FAKE_MACHINE.next_state("a_state", "w_event") == "b_state"
        assert FAKE_MACHINE.next_state("a_state", "x_event") == "c_state"
        assert FAKE_MACHINE.next_state("b_state", "w_event") == "b_state"
        assert FAKE_MACHINE.next_state("b_state", "z_event") == "a_state"
        assert FAKE_MACHINE.next_state("c_state", "y_event") == "a_state"
        assert FAKE_MACHINE.next_state("c_state", "x_event") == "b_state"
        assert FAKE_MACHINE.next_state("d_state", "x_event") == "stay"
        assert FAKE_MACHINE.next_state("b_state", "x_event") is None
        assert FAKE_MACHINE.next_state("c_state", "w_event") is None

    def test_fake_machine_is_valid(self) -> None:
        assert FAKE_MACHINE.validate() == []

    def test_validate_reports_undeclared_and_shadowed(self) -> None:
        machine = Machine(states=["a", "b"], events=["e"])
        machine.state_transition("a", "e", next="b")
        machine.state_transition("a", "e", next="a")
        machine.state_transition("x", "e", next="b")
        machine.state_transition("a", "q", next="nowhere")

        errors = machine.validate()

        assert any("sombreada" in e for e in errors)
        assert any("estado de origem não declarado" in e for e in errors)
        assert any("evento não declarado" in e for e in errors)
        assert any("'nowhere'" in e for e in errors)
        assert len(errors) == 4

    def test_repr_mentions_transition_count(self) -> None:
        assert "transitions=" in repr(FAKE_MACHINE)
