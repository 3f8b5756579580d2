"""Unit tests for the call tree model and builder."""

from __future__ import annotations

import pytest

from flamecanvas.model import (
    CallFrame,
    CallTreeBuilder,
    CallTreeModel,
    Category,
    Location,
    SourceLocation,
)


class TestCallTreeBuilder:
    """Test building models from stacks."""

    def test_boundary_samples(self, abc_model):
        """The first and last stacks are repeated as boundary samples."""
        assert abc_model.samples[0] == abc_model.samples[1]
        assert abc_model.samples[-1] == abc_model.samples[-2]
        assert abc_model.time_deltas == (1000.0, 1000.0, 1000.0, 1000.0, 0.0, 0.0)
        assert abc_model.duration == 4000.0

    def test_one_location_per_function(self, wide_model):
        names = [loc.call_frame.function_name for loc in wide_model.locations]
        assert names == ["main", "load", "read", "parse", "run", "step", "gc", "flush", "idle"]

    def test_one_node_per_prefix(self):
        """A function under different parents shares a location but not a node."""
        builder = CallTreeBuilder()
        model = builder.build([["a", "x"], ["b", "x"]])
        assert len(model.locations) == 3
        assert len(model.nodes) == 4
        x_nodes = [n for n in model.nodes if n.location_id == 1]
        assert [n.parent for n in x_nodes] == [0, 2]

    def test_root_has_no_parent(self, abc_model):
        assert abc_model.nodes[0].parent is None
        assert all(n.parent is not None for n in abc_model.nodes[1:])

    def test_sources_and_categories(self, wide_model):
        step = wide_model.locations[5]
        assert step.src == SourceLocation(path="/src/run.py", line_number=6, column_number=1)
        assert step.call_frame.url == "file:///src/run.py"
        assert step.category is Category.USER
        assert wide_model.locations[6].category is Category.SYSTEM
        assert wide_model.locations[2].src is None
        assert wide_model.locations[2].call_frame.url == ""

    def test_default_deltas(self):
        model = CallTreeBuilder().build([["a"], ["a"]])
        assert model.duration == 2000.0

    def test_empty_stack_rejected(self):
        with pytest.raises(ValueError, match="at least one frame"):
            CallTreeBuilder().build([["a"], []])

    def test_delta_count_mismatch(self):
        with pytest.raises(ValueError, match="Expected 2 deltas"):
            CallTreeBuilder().build([["a"], ["b"]], deltas=[1.0])

    def test_no_stacks(self, make_model):
        model = make_model([])
        assert model.samples == ()
        assert model.duration == 0


class TestCallTreeModelSerialization:
    """Test the camelCase dictionary form."""

    def test_roundtrip(self, wide_model):
        assert CallTreeModel.from_dict(wide_model.to_dict()) == wide_model

    def test_camel_case_keys(self, abc_model):
        data = abc_model.to_dict()
        assert set(data) >= {"nodes", "locations", "samples", "timeDeltas", "duration"}
        assert data["nodes"][1] == {"id": 1, "locationId": 1, "parent": 0}
        assert data["locations"][0]["callFrame"]["functionName"] == "A"
        assert data["locations"][0]["src"]["source"]["path"] == "/src/main.py"

    def test_optional_fields_default(self):
        model = CallTreeModel.from_dict(
            {
                "nodes": [{"id": 0, "locationId": 0}],
                "locations": [{"id": 0, "callFrame": {"functionName": "(root)"}}],
                "samples": [0, 0],
                "timeDeltas": [5, 0],
                "duration": 5,
            }
        )
        assert model.nodes[0].parent is None
        assert model.locations[0] == Location(
            id=0, call_frame=CallFrame(function_name="(root)"), category=Category.NONE
        )
        assert model.metadata == {}

    def test_missing_key(self):
        with pytest.raises(ValueError, match="Malformed"):
            CallTreeModel.from_dict({"nodes": [], "locations": []})

    def test_metadata_not_compared(self, abc_model):
        data = abc_model.to_dict()
        data["metadata"] = {"source": "test"}
        assert CallTreeModel.from_dict(data) == abc_model
