"""Tests for the deduplicator."""

from paste_json.inference import Deduplicator, SchemaBuilder
from paste_json.models import ArrayOf, ClassForest, ClassRef, Primitive
from paste_json.types import PrimitiveKind


class TestDeduplicator:
    """Tests for Deduplicator class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.builder = SchemaBuilder()
        self.deduplicator = Deduplicator()

    def test_identical_siblings_collapse(self):
        """Test that sibling objects with the same shape share one node."""
        forest = self.builder.build({
            "home": {"street": "Main", "number": 1},
            "work": {"street": "Side", "number": 2},
        })

        forest = self.deduplicator.deduplicate(forest)

        assert len(forest) == 2
        assert forest.root.fields["home"] == forest.root.fields["work"]

    def test_identical_non_siblings_collapse(self):
        """Test that identical shapes at different depths share one node."""
        forest = self.builder.build({
            "point": {"x": 1, "y": 2},
            "shape": {"center": {"x": 3, "y": 4}, "corners": [{"x": 0, "y": 0}]},
        })

        forest = self.deduplicator.deduplicate(forest)

        point_ref = forest.root.fields["point"]
        shape = forest.get(forest.root.fields["shape"].class_id)
        assert shape.fields["center"] == point_ref
        assert shape.fields["corners"] == ArrayOf(point_ref)
        assert len(forest) == 3

    def test_first_encountered_node_is_canonical(self):
        """Test that the earliest node survives."""
        forest = self.builder.build({"a": {"v": 1}, "b": {"v": 2}})
        first_id = forest.root.fields["a"].class_id

        forest = self.deduplicator.deduplicate(forest)

        assert forest.root.fields["b"] == ClassRef(first_id)
        assert forest.get(first_id).origin_key == "a"

    def test_nested_signatures_compare_structure(self):
        """Test that parents collapse when their children are structurally equal."""
        forest = self.builder.build({
            "left": {"inner": {"id": "x"}},
            "right": {"inner": {"id": "y"}},
        })

        forest = self.deduplicator.deduplicate(forest)

        assert len(forest) == 3
        assert forest.root.fields["left"] == forest.root.fields["right"]

    def test_different_key_order_is_different_shape(self):
        """Test that key order is part of the shape."""
        forest = self.builder.build({"a": {"x": 1, "y": 2}, "b": {"y": 2, "x": 1}})

        forest = self.deduplicator.deduplicate(forest)

        assert len(forest) == 3

    def test_different_types_are_kept(self):
        """Test that same keys with different types stay separate."""
        forest = self.builder.build({"a": {"v": 1}, "b": {"v": "one"}})

        forest = self.deduplicator.deduplicate(forest)

        assert len(forest) == 3

    def test_root_is_never_merged(self):
        """Test that nodes with the root's shape neither absorb nor replace the root."""
        forest = ClassForest()
        root = forest.create_node(None)
        root.add_field("value", Primitive(PrimitiveKind.INTEGER))
        for key in ("twin", "other_twin"):
            forest.create_node(key).add_field("value", Primitive(PrimitiveKind.INTEGER))

        forest = self.deduplicator.deduplicate(forest)

        assert [node.origin_key for node in forest] == [None, "twin"]
        assert forest.root is root

    def test_signatures_use_referenced_shape(self):
        """Test that class references contribute the referenced node's signature."""
        forest = self.builder.build({"a": {"p": {"q": 1}}, "b": {"p": {"q": 1}}})

        signatures = self.deduplicator.compute_signatures(forest)

        a_id = forest.root.fields["a"].class_id
        b_id = forest.root.fields["b"].class_id
        assert a_id != b_id
        assert signatures[a_id] == signatures[b_id]

    def test_signatures_when_parent_created_after_child(self):
        """Test signatures for a forest whose references point to later nodes."""
        forest = ClassForest()
        root = forest.create_node(None)
        leaf = forest.create_node("leaf")
        leaf.add_field("q", Primitive(PrimitiveKind.INTEGER))
        parent = forest.create_node("parent")
        parent.add_field("p", ClassRef(leaf.id))
        root.add_field("parent", ClassRef(parent.id))

        signatures = self.deduplicator.compute_signatures(forest)

        assert signatures[parent.id] == (("p", ("class", signatures[leaf.id])),)

    def test_signatures_after_rewrite(self):
        """Test that signatures can be recomputed on a deduplicated forest."""
        forest = self.deduplicator.deduplicate(self.builder.build({
            "early": {"x": 1},
            "holder": {"inner": {"y": 2}, "again": {"x": 3}},
            "late": {"y": 4},
        }))

        signatures = self.deduplicator.compute_signatures(forest)
        holder = forest.get(forest.root.fields["holder"].class_id)

        assert set(signatures) == {node.id for node in forest}
        assert holder.fields["again"] == forest.root.fields["early"]
        assert signatures[holder.fields["inner"].class_id] == (
            ("y", ("primitive", "integer")),
        )
