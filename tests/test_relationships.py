"""
Tests for sibling/friend links.

Run: pytest tests/test_relationships.py -v
"""

from roster.engines import RelationshipGraph
from roster.models import Relationship, RelationshipType


class TestAddRelationship:
    def test_link_is_symmetric(self, make_student):
        students = [make_student("a"), make_student("b")]
        updated = RelationshipGraph.add_relationship(students, "a", "b", RelationshipType.FRIEND)
        a, b = updated
        assert a.relationships == [Relationship("b", RelationshipType.FRIEND)]
        assert b.relationships == [Relationship("a", RelationshipType.FRIEND)]

    def test_existing_link_is_not_duplicated(self, make_student):
        students = [make_student("a"), make_student("b")]
        once = RelationshipGraph.add_relationship(students, "a", "b")
        twice = RelationshipGraph.add_relationship(once, "b", "a", RelationshipType.FRIEND)
        assert len(twice[0].relationships) == 1
        assert twice[0].relationships[0].type == RelationshipType.SIBLING

    def test_inputs_are_not_mutated(self, make_student):
        students = [make_student("a"), make_student("b")]
        RelationshipGraph.add_relationship(students, "a", "b")
        assert students[0].relationships == []
        assert students[1].relationships == []

    def test_self_link_is_ignored(self, make_student):
        students = [make_student("a")]
        updated = RelationshipGraph.add_relationship(students, "a", "a")
        assert updated[0].relationships == []


class TestTransitiveGroup:
    def test_walks_chains_and_excludes_start(self, make_student):
        students = [make_student("a"), make_student("b"), make_student("c"), make_student("d")]
        students = RelationshipGraph.add_relationship(students, "a", "b")
        students = RelationshipGraph.add_relationship(students, "b", "c", RelationshipType.FRIEND)
        group = RelationshipGraph.transitive_group(students, "a")
        assert [s.id for s in group] == ["b", "c"]

    def test_unlinked_student_has_empty_group(self, make_student):
        students = [make_student("a"), make_student("b")]
        assert RelationshipGraph.transitive_group(students, "a") == []

    def test_unknown_targets_are_skipped(self, make_student):
        a = make_student("a", relationships=[Relationship("ghost"), Relationship("b")])
        b = make_student("b", relationships=[Relationship("a")])
        group = RelationshipGraph.transitive_group([a, b], "a")
        assert [s.id for s in group] == ["b"]
