"""Unit tests for focus traversal and event routing."""

import unittest

from cellwidgets import (
    WidgetRoot, BufferSurface, HBox, VBox, Entry, Label, Widget,
    KEY_TAB, KEY_BACKTAB, KEY_ENTER,
)


class FocusTestCase(unittest.TestCase):

    def assertFocused(self, expected, entries):
        """Assert that exactly the expected entry (or none) is focused."""
        focused = [e for e in entries if e.focused]
        self.assertEqual(focused, [] if expected is None else [expected])


class TestTabTraversal(FocusTestCase):

    def setUp(self):
        self.root = WidgetRoot(BufferSurface((30, 3)))
        self.first, self.second = Entry('one'), Entry('two')
        self.box = self.root.add(HBox(self.first, Label('|'), self.second))
        self.entries = [self.first, self.second]

    def test_nothing_focused_initially(self):
        self.assertFocused(None, self.entries)
        self.assertIsNone(self.box.focused_child)

    def test_tab_cycles_and_wraps(self):
        self.assertTrue(self.root.event((KEY_TAB,)))
        self.assertFocused(self.first, self.entries)
        self.assertTrue(self.root.event((KEY_TAB,)))
        self.assertFocused(self.second, self.entries)
        self.assertTrue(self.root.event((KEY_TAB,)))
        self.assertFocused(self.first, self.entries)

    def test_backtab_cycles_backwards(self):
        self.root.event((KEY_BACKTAB,))
        self.assertFocused(self.second, self.entries)
        self.root.event((KEY_BACKTAB,))
        self.assertFocused(self.first, self.entries)
        self.root.event((KEY_BACKTAB,))
        self.assertFocused(self.second, self.entries)

    def test_keys_reach_focused_widget_only(self):
        self.root.event((KEY_TAB,))
        self.root.event((KEY_TAB,))
        self.assertTrue(self.root.event(('!',)))
        self.assertEqual(self.first.text, 'one')
        self.assertEqual(self.second.text, 'two!')

    def test_unrouted_event_is_dropped(self):
        self.assertFalse(self.root.event(('x',)))
        self.assertFalse(self.root.event((KEY_ENTER,)))
        self.assertEqual(self.first.text, 'one')
        self.assertEqual(self.second.text, 'two')

    def test_removing_focused_child(self):
        self.root.focus_widget(self.first)
        self.box.remove(self.first)
        self.assertFalse(self.first.focused)
        self.assertIsNone(self.box.focused_child)
        self.assertFalse(self.root.event(('x',)))


class TestNestedFocus(FocusTestCase):

    def setUp(self):
        self.a, self.b, self.c = Entry('a'), Entry('b'), Entry('c')
        self.inner = HBox(self.a, Widget(), self.b)
        self.root = WidgetRoot(BufferSurface((20, 4)))
        self.root.add(VBox(self.inner, Label('x'), self.c, border=True))
        self.entries = [self.a, self.b, self.c]

    def test_tab_descends_into_boxes(self):
        seen = []
        for _ in range(6):
            self.root.event((KEY_TAB,))
            self.assertEqual(sum(e.focused for e in self.entries), 1)
            seen.append([e.text for e in self.entries if e.focused][0])
        self.assertEqual(seen, ['a', 'b', 'c', 'a', 'b', 'c'])

    def test_focus_widget(self):
        self.assertTrue(self.root.focus_widget(self.b))
        self.assertFocused(self.b, self.entries)
        self.assertTrue(self.root.focus_widget(self.c))
        self.assertFocused(self.c, self.entries)
        self.assertTrue(self.root.focus_widget(self.a))
        self.assertFocused(self.a, self.entries)
        self.root.event(('!',))
        self.assertEqual(self.a.text, 'a!')

    def test_focus_widget_then_tab(self):
        self.root.focus_widget(self.b)
        self.root.event((KEY_TAB,))
        self.assertFocused(self.c, self.entries)

    def test_focus_box_focuses_first_leaf(self):
        self.assertTrue(self.root.focus_widget(self.inner))
        self.assertFocused(self.a, self.entries)

    def test_focus_unknown_widget(self):
        self.assertFalse(self.root.focus_widget(Entry()))
        self.assertFocused(None, self.entries)


class TestUnfocusableTargets(FocusTestCase):

    def setUp(self):
        self.root = WidgetRoot(BufferSurface((20, 1)))
        self.entry = Entry('e')

    def test_focus_label_keeps_focus(self):
        label = Label('x')
        self.root.add(HBox(self.entry, label))
        self.assertTrue(self.root.focus_widget(self.entry))
        self.assertFalse(self.root.focus_widget(label))
        self.assertTrue(self.entry.focused)
        self.assertIs(self.root.widget.focused_child, self.entry)
        self.assertTrue(self.root.event(('!',)))
        self.assertEqual(self.entry.text, 'e!')

    def test_focus_box_without_focusable_leaves(self):
        inner = HBox(Label('y'), Label('z'))
        self.root.add(HBox(self.entry, inner))
        self.root.focus_widget(self.entry)
        self.assertFalse(self.root.focus_widget(inner))
        self.assertTrue(self.entry.focused)
        self.assertIs(self.root.widget.focused_child, self.entry)
        self.assertIsNone(inner.focused_child)

    def test_focus_bare_widget_as_root(self):
        spacer = self.root.add(Widget())
        self.assertFalse(self.root.focus_widget(spacer))


class TestRootEdgeCases(FocusTestCase):

    def test_no_focusable_widgets(self):
        root = WidgetRoot(BufferSurface((10, 1)))
        root.add(HBox(Label('a'), Widget()))
        self.assertFalse(root.event((KEY_TAB,)))

    def test_empty_root(self):
        root = WidgetRoot(BufferSurface((10, 1)))
        self.assertFalse(root.event((KEY_TAB,)))
        self.assertFalse(root.event(('x',)))
        root.resize()
        root.draw()

    def test_lone_entry(self):
        root = WidgetRoot(BufferSurface((10, 1), empty='.'))
        e = root.add(Entry())
        self.assertTrue(root.event((KEY_TAB,)))
        self.assertTrue(e.focused)
        self.assertTrue(root.event(('a',)))
        self.assertEqual(e.text, 'a')
        self.assertTrue(root.focus_widget(e))
        self.assertTrue(e.focused)

    def test_root_fits_widget_to_surface(self):
        surface = BufferSurface((12, 3), empty='.')
        root = WidgetRoot(surface)
        e = root.add(Entry('hi'))
        root.resize()
        self.assertEqual(e.size, (12, 3))
        root.draw()
        self.assertEqual(surface.lines(),
                         ['hi          ', '............', '............'])


if __name__ == '__main__':
    unittest.main()
