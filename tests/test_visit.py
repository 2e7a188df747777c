"""
Tree walker tests - order, type tests, visitor actions and deep trees
"""

import sys

from directive_mdx.lib.builder import node_make
from directive_mdx.lib.visit import VisitAction, tree_visit


def tree_make():
    """
    root
      paragraph(a)
        text(a1)
        text(a2)
      paragraph(b)
        text(b1)
    """
    return node_make('root', [
        node_make('paragraph', [
            node_make('text', value='a1'),
            node_make('text', value='a2'),
        ], name='a'),
        node_make('paragraph', [node_make('text', value='b1')], name='b'),
    ])


def chain_make(depth: int, type: str = 'paragraph'):
    """Root holding a single chain of ``depth`` nested nodes"""
    root = node_make('root')
    current = root
    for level in range(depth):
        child = node_make(type, name=str(level))
        current.children.append(child)
        current = child
    return root


class TestTraversalOrder:
    """Test pre-order document-order traversal"""

    def test_preorder(self):
        """Parents come before children, siblings in document order"""
        seen = []
        tree_visit(tree_make(), None, lambda node, index, parent: seen.append(node.name or node.value or node.type))
        assert seen == ['root', 'a', 'a1', 'a2', 'b', 'b1']

    def test_type_filter(self):
        """A string test visits only that node type"""
        seen = []
        tree_visit(tree_make(), 'text', lambda node, index, parent: seen.append(node.value))
        assert seen == ['a1', 'a2', 'b1']

    def test_type_collection(self):
        """A collection test visits any of its types"""
        seen = []
        tree_visit(tree_make(), {'root', 'paragraph'}, lambda node, index, parent: seen.append(node.type))
        assert seen == ['root', 'paragraph', 'paragraph']

    def test_index_and_parent(self):
        """Visitor receives the child's index and its parent"""
        tree = tree_make()
        seen = []
        tree_visit(tree, 'paragraph', lambda node, index, parent: seen.append((index, parent)))
        assert seen == [(0, tree), (1, tree)]

    def test_root_has_no_parent(self):
        """The root is visited with no index and no parent"""
        seen = []
        tree_visit(tree_make(), 'root', lambda node, index, parent: seen.append((index, parent)))
        assert seen == [(None, None)]


class TestVisitActions:
    """Test SKIP and EXIT"""

    def test_skip(self):
        """SKIP leaves the node's children unvisited"""
        seen = []

        def visitor(node, index, parent):
            seen.append(node.name or node.value)
            if node.name == 'a':
                return VisitAction.SKIP

        tree_visit(tree_make(), {'paragraph', 'text'}, visitor)
        assert seen == ['a', 'b', 'b1']

    def test_exit(self):
        """EXIT stops the walk immediately"""
        seen = []

        def visitor(node, index, parent):
            seen.append(node.value)
            if node.value == 'a2':
                return VisitAction.EXIT

        tree_visit(tree_make(), 'text', visitor)
        assert seen == ['a1', 'a2']

    def test_skip_root(self):
        """SKIP on the root ends the walk"""
        seen = []

        def visitor(node, index, parent):
            seen.append(node.type)
            return VisitAction.SKIP

        tree_visit(tree_make(), None, visitor)
        assert seen == ['root']


class TestMutationDuringWalk:
    """Children are read after the visitor runs"""

    def test_replaced_children_are_walked(self):
        """Children swapped in by the visitor are walked in the same pass"""
        tree = tree_make()
        seen = []

        def visitor(node, index, parent):
            if node.name == 'a':
                node.children = [node_make('text', value='new')]
            elif node.type == 'text':
                seen.append(node.value)

        tree_visit(tree, None, visitor)
        assert seen == ['new', 'b1']

    def test_appended_children_are_walked(self):
        """Children appended by the visitor are walked in the same pass"""
        tree = tree_make()
        seen = []

        def visitor(node, index, parent):
            if node.name == 'b':
                node.children.append(node_make('text', value='b2'))
            elif node.type == 'text':
                seen.append(node.value)

        tree_visit(tree, None, visitor)
        assert seen == ['a1', 'a2', 'b1', 'b2']


class TestDeepTrees:
    """Nesting depth is not limited by the interpreter's recursion limit"""

    def test_deeper_than_recursion_limit(self):
        """Every node of a chain deeper than the recursion limit is visited"""
        depth = sys.getrecursionlimit() + 200
        seen = []

        tree_visit(chain_make(depth), 'paragraph', lambda node, index, parent: seen.append(node.name))

        assert len(seen) == depth
        assert seen[0] == '0'
        assert seen[-1] == str(depth - 1)

    def test_deep_parent_links(self):
        """Each node in a deep chain is reported with its own parent"""
        tree = chain_make(1200)
        pairs = []

        tree_visit(tree, 'paragraph', lambda node, index, parent: pairs.append((index, parent.name)))

        assert pairs[0] == (0, None)
        assert pairs[1] == (0, '0')
        assert pairs[-1] == (0, '1198')
