"""
Relationship Graph.

Sibling and friend links between students. Links are stored on both ends,
so the graph is undirected.
"""

from dataclasses import replace

from ..models import Relationship, RelationshipType


class RelationshipGraph:
    """
    Maintains and walks sibling/friend links.

    Both operations take the student list as input and never mutate it;
    add_relationship returns a new list with updated copies.
    """

    @staticmethod
    def add_relationship(students: list, source_id: str, target_id: str,
                         rel_type: RelationshipType = RelationshipType.SIBLING) -> list:
        """
        Link two students symmetrically.

        An existing link between the pair is left as it is.
        """
        if source_id == target_id:
            return list(students)

        updated = []
        for s in students:
            other = None
            if s.id == source_id:
                other = target_id
            elif s.id == target_id:
                other = source_id

            if other is None or s.is_linked_to(other):
                updated.append(s)
            else:
                updated.append(replace(
                    s, relationships=s.relationships + [Relationship(other, rel_type)]
                ))
        return updated

    @staticmethod
    def transitive_group(students: list, start_id: str) -> list:
        """
        Everyone reachable from start_id through any chain of links.

        The start student is excluded; links to unknown ids are skipped.
        """
        by_id = {s.id: s for s in students}
        seen = set()
        stack = [start_id]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            student = by_id.get(current)
            if student:
                stack.extend(r.target_id for r in student.relationships if r.target_id not in seen)

        seen.discard(start_id)
        return [by_id[i] for i in sorted(seen) if i in by_id]
