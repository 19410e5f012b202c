"""
Tests for fourc.catalog.mutator.

Every rejected edit must hand back the very same state object; every accepted
edit must replace exactly one record and leave the rest untouched.
"""

import math

import pytest

from fourc.catalog.entities import CatalogState, UserGroup, default_state
from fourc.catalog.mutator import (
    reset_all,
    set_license,
    set_quick_scenario,
    update_agent_field,
    update_group_field,
    update_mix_slot,
    update_quick_field,
)


# =============================================================================
# Agents
# =============================================================================


class TestUpdateAgentField:

    def test_changes_only_the_target_field(self, state):
        new = update_agent_field(state, 2, "turns_per_session", 10)

        assert new is not state
        assert new.agents[1].turns_per_session == 10
        assert new.agents[1].cost_per_turn == state.agents[1].cost_per_turn
        assert new.agents[1].name == state.agents[1].name
        for i in (0, 2, 3):
            assert new.agents[i] is state.agents[i]
        assert new.groups is state.groups
        assert new.license == state.license
        assert new.quick is state.quick

    def test_order_preserved(self, state):
        new = update_agent_field(state, 3, "cost_per_turn", 1.25)
        assert [a.id for a in new.agents] == [1, 2, 3, 4]
        assert new.agents[2].cost_per_turn == 1.25

    def test_rename(self, state):
        new = update_agent_field(state, 1, "name", "Retriever")
        assert new.agents[0].name == "Retriever"

    def test_input_state_is_untouched(self, state):
        update_agent_field(state, 1, "turns_per_session", 20)
        assert state == default_state()

    def test_unknown_id_is_noop(self, state):
        assert update_agent_field(state, 99, "turns_per_session", 5) is state

    @pytest.mark.parametrize("field", ["id", "color", "cost_per_session", "bogus"])
    def test_non_updatable_field_is_noop(self, state, field):
        assert update_agent_field(state, 1, field, 5) is state

    @pytest.mark.parametrize("field, value", [
        ("turns_per_session", 0),
        ("turns_per_session", 0.99),
        ("turns_per_session", 26),
        ("cost_per_turn", 0),
        ("cost_per_turn", 0.009),
        ("cost_per_turn", 1.51),
        ("cost_per_turn", -0.5),
        ("cost_per_turn", math.nan),
        ("cost_per_turn", math.inf),
        ("turns_per_session", True),
        ("turns_per_session", None),
        ("turns_per_session", "many"),
        ("name", 42),
        ("name", None),
    ])
    def test_out_of_bounds_is_rejected(self, state, field, value):
        assert update_agent_field(state, 1, field, value) is state

    @pytest.mark.parametrize("field, value", [
        ("turns_per_session", 1),
        ("turns_per_session", 25),
        ("cost_per_turn", 0.01),
        ("cost_per_turn", 1.5),
    ])
    def test_bounds_are_inclusive(self, state, field, value):
        new = update_agent_field(state, 1, field, value)
        assert getattr(new.agents[0], field) == value

    def test_numeric_string_is_accepted(self, state):
        new = update_agent_field(state, 1, "turns_per_session", "12")
        assert new.agents[0].turns_per_session == 12.0


# =============================================================================
# Groups
# =============================================================================


class TestUpdateGroupField:

    def test_changes_only_the_target_group(self, state):
        new = update_group_field(state, 3, "headcount", 250)
        assert new.groups[2].headcount == 250
        assert new.groups[2].mix == state.groups[2].mix
        for i in (0, 1, 3):
            assert new.groups[i] is state.groups[i]
        assert new.agents is state.agents

    def test_headcount_is_stored_as_int(self, state):
        new = update_group_field(state, 1, "headcount", 12.0)
        assert new.groups[0].headcount == 12
        assert isinstance(new.groups[0].headcount, int)

    def test_sessions(self, state):
        new = update_group_field(state, 4, "sessions_per_month", 400)
        assert new.groups[3].sessions_per_month == 400

    def test_unknown_id_is_noop(self, state):
        assert update_group_field(state, 0, "headcount", 5) is state

    def test_mix_is_not_a_field_edit(self, state):
        assert update_group_field(state, 1, "mix", (100, 0, 0, 0)) is state

    @pytest.mark.parametrize("field, value", [
        ("headcount", 0),
        ("headcount", 501),
        ("headcount", 2.5),
        ("sessions_per_month", 0),
        ("sessions_per_month", 400.5),
        ("sessions_per_month", -3),
    ])
    def test_out_of_bounds_is_rejected(self, state, field, value):
        assert update_group_field(state, 1, field, value) is state


# =============================================================================
# Mix slots
# =============================================================================


class TestUpdateMixSlot:

    def test_sets_one_slot(self, state):
        new = update_mix_slot(state, 2, 3, 55)
        assert new.groups[1].mix == (30, 50, 10, 55)
        assert new.groups[0] is state.groups[0]

    def test_sum_is_not_enforced(self, state):
        new = update_mix_slot(state, 1, 2, 100)
        assert new.groups[0].mix_total == 200

    @pytest.mark.parametrize("value", [-1, 100.5, math.nan, "lots", None])
    def test_out_of_bounds_value_is_rejected(self, state, value):
        assert update_mix_slot(state, 1, 0, value) is state

    @pytest.mark.parametrize("index", [-1, 4, 10, True, 1.0, "0"])
    def test_index_outside_agent_catalog_is_rejected(self, state, index):
        assert update_mix_slot(state, 1, index, 50) is state

    def test_unknown_group_is_noop(self, state):
        assert update_mix_slot(state, 42, 0, 50) is state

    def test_short_mix_is_padded(self, state):
        short = CatalogState(
            agents=state.agents,
            groups=(UserGroup(7, "Short", 1, 10, (50,)),),
            license=20.0,
            quick=state.quick,
        )
        new = update_mix_slot(short, 7, 2, 30)
        assert new.groups[0].mix == (50, 0.0, 30)


# =============================================================================
# Scalars and reset
# =============================================================================


class TestScalars:

    @pytest.mark.parametrize("value", [0, 12.5, 30])
    def test_license_in_bounds(self, state, value):
        assert set_license(state, value).license == value

    @pytest.mark.parametrize("value", [-0.01, 30.01, math.inf, "free", False])
    def test_license_out_of_bounds(self, state, value):
        assert set_license(state, value) is state

    def test_license_change_keeps_catalogs(self, state):
        new = set_license(state, 9.99)
        assert new.agents is state.agents
        assert new.groups is state.groups
        assert new.quick is state.quick

    def test_quick_scenario(self, state):
        new = set_quick_scenario(state, 120, 8, 0.5)
        assert (new.quick.cadence, new.quick.conversation_turns, new.quick.cost_per_turn) == (120, 8, 0.5)
        assert new.agents is state.agents

    @pytest.mark.parametrize("args", [
        (0, 5, 0.12),
        (251, 5, 0.12),
        (40, 0, 0.12),
        (40, 26, 0.12),
        (40, 5, 0.0),
        (40, 5, 1.51),
    ])
    def test_quick_scenario_is_all_or_nothing(self, state, args):
        assert set_quick_scenario(state, *args) is state

    def test_update_quick_field(self, state):
        new = update_quick_field(state, "cadence", 250)
        assert new.quick.cadence == 250
        assert new.quick.conversation_turns == state.quick.conversation_turns
        assert new.quick.cost_per_turn == state.quick.cost_per_turn

    def test_update_quick_field_rejections(self, state):
        assert update_quick_field(state, "cadence", 251) is state
        assert update_quick_field(state, "license", 10) is state


class TestResetAll:

    def test_discards_every_edit(self, state):
        edited = update_agent_field(state, 1, "turns_per_session", 25)
        edited = update_group_field(edited, 2, "headcount", 400)
        edited = update_mix_slot(edited, 3, 0, 100)
        edited = set_license(edited, 5)
        edited = set_quick_scenario(edited, 1, 1, 0.01)
        assert edited != state

        assert reset_all() == default_state()

    def test_default_dataset(self):
        fresh = reset_all()
        assert [a.name for a in fresh.agents] == [
            "Information Retrieval Agent", "Task Agent", "Analyst Agent", "Strategy Agent"]
        assert [(a.turns_per_session, a.cost_per_turn) for a in fresh.agents] == [
            (1, 0.12), (4, 0.25), (8, 0.50), (3, 0.90)]
        assert [(g.name, g.headcount, g.sessions_per_month, g.mix) for g in fresh.groups] == [
            ("FLW", 1, 15, (80, 20, 0, 0)),
            ("Information Worker", 1, 40, (30, 50, 10, 10)),
            ("Manager", 1, 80, (15, 45, 30, 10)),
            ("Executive", 1, 120, (5, 5, 50, 40)),
        ]
        assert fresh.license == 20
        assert (fresh.quick.cadence, fresh.quick.conversation_turns, fresh.quick.cost_per_turn) == (40, 5, 0.12)
