"""Tests for indentation-driven outline construction."""

from __future__ import annotations

import unittest

from outlinebar.lang import ItemKind
from outlinebar.outline import ROOT_NAME, OutlineNode, build_outline, outline_sort_key

EXAMPLE_SOURCE = (
    "class Foo:\n"
    "    def bar():\n"
    "        x = 1\n"
    "def baz():\n"
    "    pass\n"
    "y = 2\n"
)


def _names(node: OutlineNode) -> list[str]:
    return [child.name for child in node.children]


def _sibling_order_holds(node: OutlineNode) -> bool:
    keys = [outline_sort_key(child) for child in node.children]
    if keys != sorted(keys):
        return False
    return all(_sibling_order_holds(child) for child in node.children)


class BuildOutlineTests(unittest.TestCase):
    def test_example_outline_structure(self) -> None:
        root = build_outline(EXAMPLE_SOURCE)

        self.assertEqual(root.name, ROOT_NAME)
        self.assertEqual(root.kind, ItemKind.NONE)
        self.assertEqual(root.line, -1)
        self.assertEqual(_names(root), ["Foo", "baz", "y"])
        self.assertEqual(
            [child.kind for child in root.children],
            [ItemKind.CLASS, ItemKind.FUNCTION, ItemKind.CONSTANT],
        )

        foo = root.children[0]
        self.assertEqual(_names(foo), ["bar"])
        bar = foo.children[0]
        self.assertEqual((bar.kind, bar.indent, bar.line), (ItemKind.FUNCTION, 4, 2))
        # Indented assignments are not recognized, so ``x`` never appears.
        self.assertEqual(bar.children, [])
        self.assertEqual([child.line for child in root.children], [1, 4, 6])

    def test_three_levels_and_dedent_to_intermediate_level(self) -> None:
        source = (
            "class Outer:\n"
            "    class Inner:\n"
            "        def method(self):\n"
            "            pass\n"
            "    def helper(self):\n"
            "        pass\n"
            "def top():\n"
            "    pass\n"
        )
        root = build_outline(source)

        self.assertEqual(_names(root), ["Outer", "top"])
        outer = root.children[0]
        self.assertEqual(_names(outer), ["Inner", "helper"])
        inner = outer.children[0]
        self.assertEqual(_names(inner), ["method"])
        self.assertIs(inner.children[0].parent, inner)
        self.assertIs(outer.children[1].parent, outer)

    def test_same_indent_siblings_share_parent_and_are_sorted(self) -> None:
        source = (
            "class A:\n"
            "    def zed(self):\n"
            "        pass\n"
            "    def alpha(self):\n"
            "        pass\n"
        )
        root = build_outline(source)
        a = root.children[0]
        self.assertEqual(_names(a), ["alpha", "zed"])
        self.assertEqual([child.line for child in a.children], [4, 2])

    def test_duplicate_names_keep_source_order(self) -> None:
        source = (
            "def dup():\n"
            "    pass\n"
            "x = 1\n"
            "class K:\n"
            "    pass\n"
            "def dup():\n"
            "    pass\n"
        )
        root = build_outline(source)
        self.assertEqual(_names(root), ["K", "dup", "dup", "x"])
        self.assertEqual([child.line for child in root.children], [4, 1, 6, 3])

    def test_resorting_a_built_outline_is_idempotent(self) -> None:
        source = EXAMPLE_SOURCE + "class Alpha(Foo):\n    def z(self):\n        pass\n    def a(self):\n        pass\n"
        root = build_outline(source)
        before = [id(node) for node in root.walk()]

        root.sort_children_rec(outline_sort_key)

        self.assertEqual([id(node) for node in root.walk()], before)
        self.assertTrue(_sibling_order_holds(root))

    def test_indented_first_declaration_attaches_to_root(self) -> None:
        root = build_outline("    def orphan():\n        pass\n")
        self.assertEqual(_names(root), ["orphan"])

    def test_dedent_to_unseen_indent_attaches_to_root(self) -> None:
        source = (
            "class A:\n"
            "        def deep(self):\n"
            "            pass\n"
            "    def odd(self):\n"
            "        pass\n"
        )
        root = build_outline(source)
        self.assertEqual(_names(root), ["A", "odd"])
        self.assertEqual(_names(root.children[0]), ["deep"])

    def test_dedent_reattaches_as_sibling_of_last_node_at_that_indent(self) -> None:
        source = (
            "class A:\n"
            "    def m(self):\n"
            "        def inner():\n"
            "            pass\n"
            "    def n(self):\n"
            "        pass\n"
        )
        root = build_outline(source)
        a = root.children[0]
        self.assertEqual(_names(a), ["m", "n"])
        self.assertEqual(_names(a.children[0]), ["inner"])

    def test_mixed_tab_and_space_indentation_nests_incorrectly_without_error(self) -> None:
        source = (
            "class A:\n"
            "\tdef tabbed(self):\n"
            "\t\tpass\n"
            "    def spaced(self):\n"
            "        pass\n"
        )
        root = build_outline(source)
        tabbed = root.children[0].children[0]
        self.assertEqual((tabbed.name, tabbed.indent), ("tabbed", 1))
        # Four spaces count deeper than one tab, so ``spaced`` lands under ``tabbed``.
        self.assertEqual(_names(tabbed), ["spaced"])
        self.assertEqual(tabbed.children[0].indent, 4)

    def test_crlf_line_endings_keep_line_numbers(self) -> None:
        root = build_outline("class A:\r\n    def m(self):\r\n        pass\r\nZ = 1\r\n")
        self.assertEqual(_names(root), ["A", "Z"])
        self.assertEqual(root.children[0].children[0].line, 2)
        self.assertEqual(root.children[1].line, 4)

    def test_empty_source_yields_bare_root(self) -> None:
        root = build_outline("")
        self.assertEqual(root.children, [])

    def test_custom_matcher_is_used(self) -> None:
        from outlinebar.lang import ItemMatch

        def match_headings(line: str):
            if line.startswith("#"):
                return ItemMatch(line.lstrip("#").strip(), ItemKind.CLASS, 0)
            return None

        root = build_outline("# b\ntext\n# a\n", match_headings)
        self.assertEqual(_names(root), ["a", "b"])

    def test_attachments_are_logged_at_debug_level(self) -> None:
        with self.assertLogs("outlinebar.outline.parser", level="DEBUG") as logs:
            build_outline("class A:\n    def m(self):\n")
        self.assertEqual(len(logs.records), 2)
        self.assertIn("Function", logs.output[1])
        self.assertIn("added to", logs.output[1])

    def test_node_repr_lists_kind_name_line_and_indent(self) -> None:
        root = build_outline("x = 1\n\nclass Foo:\n")
        self.assertEqual(repr(root.children[0]), "OutlineNode(1, Foo, 3, 0)")


if __name__ == "__main__":
    unittest.main()
