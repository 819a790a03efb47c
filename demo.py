
import os, curses, logging

from cellwidgets import *

def demo(window):
    curses.use_default_colors()
    # Wrap the curses window so that widgets can paint onto it.
    surface = CursesSurface(window)
    # The theme is explicit configuration; the default one is a good start.
    theme = Theme(label=Style(attr=curses.A_BOLD))
    # Create the root of the widget hierarchy.
    root = WidgetRoot(surface, theme)
    # The user-visible "window" with a border, stacking its rows vertically.
    win = root.add(VBox(border=True))
    # A row with a caption and an entry that takes up the remaining width.
    row = win.add(HBox())
    row.add(Label('Name: ', policy=POLICY_MINIMUM))
    name = row.add(Entry('Lorem ipsum dolor sit amet',
                         policy=POLICY_EXPANDING))
    # A second row with two entries that share the width equally.
    pair = win.add(HBox())
    left = pair.add(Entry('0123456789foo'))
    pair.add(Widget(cminsize=(1, 1), policy=POLICY_MINIMUM))
    right = pair.add(Entry('0123456789bar'))
    # A status line reporting the changes.
    status = win.add(Label('Tab cycles focus, Return submits, Esc quits.'))
    # A bare Widget as "glue" to push everything above to the top.
    win.add(Widget(policy=POLICY_EXPANDING))
    def changed(entry):
        status.text = 'Changed: %s' % entry.text
    def submitted(entry):
        status.text = 'Submitted: %s' % entry.text
    for e in (name, left, right):
        e.on_changed(changed)
        e.on_submit(submitted)
    root.focus_widget(name)
    curses.curs_set(0)
    # Run it.
    while 1:
        window.erase()
        root.resize()
        root.draw()
        window.refresh()
        ch = window.get_wch()
        if ch == curses.KEY_RESIZE:
            continue
        event = curses_event(ch)
        if event is None:
            continue
        elif event[0] == KEY_ESCAPE:
            break
        root.event(event)

if os.environ.get('CELLWIDGETS_LOG'):
    logging.basicConfig(filename=os.environ['CELLWIDGETS_LOG'],
                        level=logging.DEBUG)
curses.wrapper(demo)
