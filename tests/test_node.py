# tests/test_node.py

import unittest
from ahoc.matcher.node import Node
from ahoc.matcher.error_handler import AutomatonError, TransitionExistsError


class TestNode(unittest.TestCase):

    def setUp(self):
        self.root = Node(state_id=0)

    def test_add_child_registers_trie_edge(self):
        """add_child creates a node reachable through children and transitions"""
        child = self.root.add_child("a", state_id=1)
        self.assertIs(self.root.children["a"], child)
        self.assertIs(self.root.transitions["a"], child)
        self.assertEqual(child.state_id, 1)
        self.assertIsNone(child.failure)
        self.assertIsNone(child.output)

    def test_add_child_twice_fails(self):
        self.root.add_child("a")
        with self.assertRaises(TransitionExistsError) as ctx:
            self.root.add_child("a")
        self.assertIsInstance(ctx.exception, AutomatonError)
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertEqual(ctx.exception.token, "a")
        self.assertIn("'a'", str(ctx.exception))

    def test_add_child_replaces_derived_transition(self):
        """A trie edge takes the place of a failure-derived transition"""
        other = Node(state_id=7)
        self.root.set_transition("x", other)
        child = self.root.add_child("x")
        self.assertIs(self.root.transition("x"), child)
        self.assertIs(self.root.children["x"], child)

    def test_transition_without_default(self):
        child = self.root.add_child(1)
        self.assertIs(self.root.transition(1), child)
        self.assertIsNone(self.root.transition(2))
        self.assertTrue(self.root.has_transition(1))
        self.assertFalse(self.root.has_transition(2))

    def test_transition_falls_back_to_default(self):
        child = self.root.add_child("a")
        self.root.default = self.root
        self.assertIs(self.root.transition("a"), child)
        self.assertIs(self.root.transition("z"), self.root)
        # The default never counts as an explicit transition
        self.assertFalse(self.root.has_transition("z"))

    def test_set_transition_first_writer_wins(self):
        child = self.root.add_child("a")
        other = Node()
        self.assertFalse(self.root.set_transition("a", other))
        self.assertIs(self.root.transition("a"), child)

        self.assertTrue(self.root.set_transition("b", other))
        self.assertIs(self.root.transition("b"), other)
        self.assertNotIn("b", self.root.children)

    def test_reset_drops_derived_state(self):
        child = self.root.add_child("a")
        child.pattern_output = ["a"]
        child.output = ["a", "inherited"]
        child.default = self.root
        child.set_transition("b", self.root)

        child.reset()
        self.assertEqual(child.output, ["a"])
        self.assertIsNone(child.default)
        self.assertEqual(child.transitions, {})
        self.assertIsNot(child.transitions, child.children)
        self.assertIsNot(child.output, child.pattern_output)

    def test_reset_output_does_not_alias_registered_output(self):
        """Extending the merged output in place leaves the registered one intact"""
        child = self.root.add_child("a")
        child.pattern_output = ["a"]
        child.reset()
        child.output += ["inherited"]
        self.assertEqual(child.pattern_output, ["a"])

        child.reset()
        self.assertEqual(child.output, ["a"])

    def test_is_accepting(self):
        self.assertFalse(self.root.is_accepting)
        self.root.output = []
        self.assertTrue(self.root.is_accepting)

    def test_repr(self):
        child = self.root.add_child("a", state_id=1)
        child.failure = self.root
        text = repr(child)
        self.assertIn("id=1", text)
        self.assertIn("failure=0", text)


if __name__ == '__main__':
    unittest.main()
