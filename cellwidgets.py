#!/usr/bin/env python3
# -*- coding: ascii -*-

"""
A small widget toolkit for character-cell terminals

cellwidgets implements a tree of widgets that negotiate their sizes and are
painted onto a grid of character cells (a "surface"). Containers (boxes)
partition their area amongst their children according to per-axis size
policies; leaf widgets (labels, entries) draw themselves into whatever area
they are assigned. Keyboard input is routed to exactly one focused widget.

A typical use would look like this:
>>> surface = BufferSurface((30, 3))
>>> root = WidgetRoot(surface)
>>> box = root.add(VBox(border=True))
>>> name = box.add(Entry('Lorem ipsum'))
>>> root.focus_widget(name)
True
>>> root.event(('!',))
True
>>> root.resize()
>>> root.draw()

The surface abstraction is deliberately narrow (a size query and a cell
setter), so that the toolkit runs on top of curses (see CursesSurface), or
entirely without a terminal (see BufferSurface).
"""

import logging as _logging
import curses as _curses

_LOGGER = _logging.getLogger(__name__)

def zbound(v, m):
    "Return x such that 0 <= x <= m"
    return max(0, min(v, m))
def addpos(p1, p2):
    "Return the sum of the 2-vectors p1 and p2"
    return (p1[0] + p2[0], p1[1] + p2[1])
def maxpos(p1, p2):
    "Return the component-by-component maximum of p1 and p2"
    return (max(p1[0], p2[0]), max(p1[1], p2[1]))
def cliprect(r, b):
    "Return the intersection of the rectangles r and b"
    x0, y0 = max(r[0], b[0]), max(r[1], b[1])
    x1 = min(r[0] + r[2], b[0] + b[2])
    y1 = min(r[1] + r[3], b[1] + b[3])
    return (x0, y0, max(0, x1 - x0), max(0, y1 - y0))

def equal_distrib(full, amnt):
    """
    Return a list of amnt approximately equal integers summing up to full

    The remainder of the division is handed out one unit at a time, starting
    with the first item.
    """
    if amnt == 0:
        return []
    base, rem = divmod(full, amnt)
    return [base + 1] * rem + [base] * (amnt - rem)

def parse_pair(v, default=(None, None)):
    """
    Expand a scalar or 2-tuple into a 2-tuple

    If any element of that is None, the corresponding value from default
    is substituted.
    """
    try:
        v = tuple(v)
    except TypeError:
        v = (v, v)
    return (default[0] if v[0] is None else v[0],
            default[1] if v[1] is None else v[1])

class Constant:
    "A named constant with a meaningful string representation"
    def __init__(self, __name__, **__dict__):
        self.__dict__ = __dict__
        self.__name__ = __name__
    def __repr__(self):
        return '<%s>' % (self.__name__,)
    def __str__(self):
        return str(self.__name__)

class Event(Constant):
    "A singleton for differentiating special events from keystrokes"
FocusEvent = Event('FocusEvent')

class Key(Constant):
    "A symbolic (non-printable) key"
KEY_ENTER = Key('KEY_ENTER')
KEY_TAB = Key('KEY_TAB')
KEY_BACKTAB = Key('KEY_BACKTAB')
KEY_BACKSPACE = Key('KEY_BACKSPACE')
KEY_DELETE = Key('KEY_DELETE')
KEY_LEFT = Key('KEY_LEFT')
KEY_RIGHT = Key('KEY_RIGHT')
KEY_HOME = Key('KEY_HOME')
KEY_END = Key('KEY_END')
KEY_ESCAPE = Key('KEY_ESCAPE')

class SizePolicy(Constant):
    """
    A rule governing how a widget reacts to surplus or lacking space

    The "fixed" attribute tells whether widgets with this policy keep their
    size hint while there is enough space; "grows" tells whether they take
    up surplus space when there is any.
    """
POLICY_MINIMUM = SizePolicy('POLICY_MINIMUM', fixed=True, grows=False)
POLICY_MAXIMUM = SizePolicy('POLICY_MAXIMUM', fixed=True, grows=False)
POLICY_PREFERRED = SizePolicy('POLICY_PREFERRED', fixed=False, grows=False)
POLICY_EXPANDING = SizePolicy('POLICY_EXPANDING', fixed=False, grows=True)
POLICY_IGNORED = SizePolicy('POLICY_IGNORED', fixed=False, grows=True)

def curses_event(ch):
    """
    Translate a value returned by a curses window's get_wch() into an event

    Returns None for input that has no meaning to the toolkit (such as
    KEY_RESIZE, which the host should handle by re-laying out).
    """
    if isinstance(ch, str):
        if ch in ('\n', '\r'):
            return (KEY_ENTER,)
        elif ch == '\t':
            return (KEY_TAB,)
        elif ch in ('\b', '\x7f'):
            return (KEY_BACKSPACE,)
        elif ch == '\x1b':
            return (KEY_ESCAPE,)
        elif ch == '\x01':
            return (KEY_HOME,)
        elif ch == '\x05':
            return (KEY_END,)
        elif ch.isprintable():
            return (ch,)
        return None
    key = _CURSES_KEYS.get(ch)
    if key is None:
        return None
    return (key,)
_CURSES_KEYS = {
    _curses.KEY_ENTER: KEY_ENTER,
    _curses.KEY_BTAB: KEY_BACKTAB,
    _curses.KEY_BACKSPACE: KEY_BACKSPACE,
    _curses.KEY_DC: KEY_DELETE,
    _curses.KEY_LEFT: KEY_LEFT,
    _curses.KEY_RIGHT: KEY_RIGHT,
    _curses.KEY_HOME: KEY_HOME,
    _curses.KEY_END: KEY_END,
}

class Style(object):
    """
    A set of display attributes for a cell

    Attributes are:
    fg  : The foreground color (a curses COLOR_* value), or None for the
          terminal's default.
    bg  : The background color, similarly.
    attr: Additional curses attributes (such as A_BOLD) OR-ed together.
    """
    def __init__(self, fg=None, bg=None, attr=0):
        "Initializer"
        self.fg = fg
        self.bg = bg
        self.attr = attr
    def __eq__(self, other):
        if not isinstance(other, Style): return NotImplemented
        return (self.fg, self.bg, self.attr) == (other.fg, other.bg,
                                                 other.attr)
    def __hash__(self):
        return hash((self.fg, self.bg, self.attr))
    def __repr__(self):
        return 'Style(fg=%r, bg=%r, attr=%r)' % (self.fg, self.bg, self.attr)

class Theme(object):
    """
    A named collection of styles

    Style names are dotted paths denoting a widget category and, optionally,
    a state; looking up a name that is not defined falls back to its
    successively shorter prefixes, and finally to "normal". For example,
    "entry.focused" resolves to the first of "entry.focused", "entry", and
    "normal" that is defined.
    """
    DEFAULTS = {
        'normal': Style(),
        'entry.focused': Style(attr=_curses.A_UNDERLINE),
        'entry.cursor': Style(attr=_curses.A_REVERSE),
        'box.border': Style(),
    }
    def __init__(self, **styles):
        """
        Initializer

        styles override (or extend) the default styles; since keyword
        arguments cannot contain dots, underscores in their names are
        translated to dots.
        """
        self._styles = dict(self.DEFAULTS)
        for k, v in styles.items():
            self.set_style(k.replace('_', '.'), v)
    def set_style(self, name, style):
        "Define the style with the given name"
        self._styles[name] = style
    def style(self, name):
        "Resolve the given style name as described in the class docstring"
        while name:
            try:
                return self._styles[name]
            except KeyError:
                name = name.rpartition('.')[0]
        return self._styles['normal']

class BufferSurface(object):
    """
    A surface keeping its cells in memory

    Useful for tests and headless rendering. Cells that have not been
    written since creation (or the last clear()) are rendered as the
    "empty" marker.
    """
    def __init__(self, size, empty=' '):
        "Initializer"
        self._size = tuple(size)
        self.empty = empty
        self.clear()
    def size(self):
        "Return the size of this surface"
        return self._size
    def set_cell(self, x, y, ch, style=None):
        "Set the cell at the given position"
        if 0 <= x < self._size[0] and 0 <= y < self._size[1]:
            self.cells[y][x] = ch
            self.styles[y][x] = style
    def clear(self):
        "Reset all cells to the empty state"
        w, h = self._size
        self.cells = [[None] * w for _ in range(h)]
        self.styles = [[None] * w for _ in range(h)]
    def lines(self):
        "Return the contents of this surface as a list of strings"
        return [''.join(self.empty if c is None else c for c in row)
                for row in self.cells]
    def render(self):
        "Return the contents of this surface as a newline-separated string"
        return '\n'.join(self.lines())
    def __str__(self):
        return self.render()

class CursesSurface(object):
    """
    A surface drawing to a curses window

    Styles are translated to curses attributes; color pairs are allocated
    on demand. The bottom-right cell of the window cannot be written with
    curses' addstr() without an error, hence, it is written using insstr().
    """
    def __init__(self, window):
        "Initializer"
        self.window = window
        self._pairs = {}
    def size(self):
        "Return the size of the underlying window"
        hw = self.window.getmaxyx()
        return (hw[1], hw[0])
    def set_cell(self, x, y, ch, style=None):
        "Set the cell at the given position"
        w, h = self.size()
        if not (0 <= x < w and 0 <= y < h):
            return
        attr = self._attr(style)
        if x == w - 1 and y == h - 1:
            self.window.insstr(y, x, ch, attr)
        else:
            self.window.addstr(y, x, ch, attr)
    def _attr(self, style):
        "Internal helper for converting styles to attributes"
        if style is None:
            return 0
        if style.fg is None and style.bg is None:
            return style.attr
        key = (style.fg, style.bg)
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            fg = -1 if style.fg is None else style.fg
            bg = -1 if style.bg is None else style.bg
            try:
                _curses.init_pair(pair, fg, bg)
            except _curses.error:
                _LOGGER.debug('Cannot allocate color pair %r', key)
                pair = 0
            self._pairs[key] = pair
        return style.attr | _curses.color_pair(pair)

class Painter(object):
    """
    Drawing helper binding a surface and a theme

    The painter maintains a stack of regions; each region is a translation
    (the origin of the local coordinate system) and a clipping rectangle
    (in surface coordinates). Drawing operations take local coordinates and
    silently drop whatever falls outside the current clipping rectangle.

    Styles are given by name and resolved through the theme.
    """
    BORDER_CHARS = {
        'h': '\u2500', 'v': '\u2502',
        'tl': '\u250c', 'tr': '\u2510', 'bl': '\u2514', 'br': '\u2518',
    }
    def __init__(self, surface, theme=None):
        "Initializer"
        self.surface = surface
        self.theme = Theme() if theme is None else theme
        size = surface.size()
        self._stack = [((0, 0), (0, 0, size[0], size[1]))]
    @property
    def origin(self):
        "The surface position of the local coordinate origin"
        return self._stack[-1][0]
    @property
    def clip(self):
        "The current clipping rectangle, in surface coordinates"
        return self._stack[-1][1]
    def push(self, rect):
        """
        Enter the given rectangle (in local coordinates)

        The rectangle becomes the new local coordinate system, and the
        clipping area is narrowed to it.
        """
        origin = addpos(self.origin, rect[:2])
        clip = cliprect((origin[0], origin[1], rect[2], rect[3]), self.clip)
        self._stack.append((origin, clip))
    def pop(self):
        "Leave the region most recently entered using push()"
        if len(self._stack) == 1:
            raise ValueError('Cannot pop the base region of a painter')
        self._stack.pop()
    def set_cell(self, x, y, ch, style='normal'):
        "Write a single cell at the given local position"
        ax, ay = addpos(self.origin, (x, y))
        c = self.clip
        if not (c[0] <= ax < c[0] + c[2] and c[1] <= ay < c[1] + c[3]):
            return False
        self.surface.set_cell(ax, ay, ch, self.theme.style(style))
        return True
    def draw_text(self, pos, text, style='normal'):
        """
        Draw a line of text starting at the given position

        Returns the amount of characters actually visible.
        """
        drawn = 0
        for n, ch in enumerate(text):
            if self.set_cell(pos[0] + n, pos[1], ch, style):
                drawn += 1
        if drawn < len(text):
            _LOGGER.debug('Clipped %d of %d characters at %r',
                          len(text) - drawn, len(text), pos)
        return drawn
    def fill(self, rect, ch=' ', style='normal'):
        "Fill the given rectangle with ch"
        for y in range(rect[1], rect[1] + rect[3]):
            for x in range(rect[0], rect[0] + rect[2]):
                self.set_cell(x, y, ch, style)
    def draw_rect(self, rect, style='normal'):
        """
        Draw a single-line frame along the edges of the given rectangle

        The interior is not touched. Rectangles smaller than two cells along
        any axis are not drawn.
        """
        x, y, w, h = rect
        if w < 2 or h < 2:
            return
        bc = self.BORDER_CHARS
        right, bottom = x + w - 1, y + h - 1
        for i in range(x + 1, right):
            self.set_cell(i, y, bc['h'], style)
            self.set_cell(i, bottom, bc['h'], style)
        for i in range(y + 1, bottom):
            self.set_cell(x, i, bc['v'], style)
            self.set_cell(right, i, bc['v'], style)
        self.set_cell(x, y, bc['tl'], style)
        self.set_cell(right, y, bc['tr'], style)
        self.set_cell(x, bottom, bc['bl'], style)
        self.set_cell(right, bottom, bc['br'], style)

class WidgetRoot(object):
    """
    A container for a widget hierarchy attached to a surface

    This class fits its (only) widget to the size of the surface, draws it
    using a fresh painter, and dispatches events to it; focus is cycled
    using Tab and back-tab, wrapping around at the ends.

    A typical use pattern would be:
    >>> root = WidgetRoot(surface)
    >>> root.add(widget)
    >>> root.resize()
    >>> root.draw()
    >>> root.event(('x',))

    Attributes are:
    surface: The surface to draw to.
    theme  : The theme to draw with.
    widget : The (only) widget to host.
    """
    def __init__(self, surface, theme=None):
        """
        Initializer

        surface is the surface to draw to; theme defaults to a default
        Theme instance.
        """
        self.surface = surface
        self.theme = Theme() if theme is None else theme
        self.widget = None
    def add(self, widget):
        """
        Install the given widget as the root of the hierarchy

        Since a WidgetRoot can only manage one widget, the previous one (if
        any) is discarded.
        """
        self.widget = widget
        return widget
    def resize(self):
        "Lay the widget out over the entire surface"
        if self.widget is not None:
            self.widget.resize(self.surface.size())
    def draw(self):
        "Draw the widget onto the surface"
        if self.widget is not None:
            self.widget.draw(Painter(self.surface, self.theme))
    def event(self, event):
        """
        Handle an input event

        Returns whether the event was consumed. Tab and back-tab key
        presses are translated into calls of focus(); if those do not
        succeed or the key was not a tab, the event is passed on to the
        widget. Events nobody is interested in are dropped.
        """
        if event[0] == KEY_TAB:
            if self.focus(): return True
        elif event[0] == KEY_BACKTAB:
            if self.focus(True): return True
        if self.widget is not None and self.widget.event(event):
            return True
        _LOGGER.debug('Dropped event %r', event)
        return False
    def focus(self, rev=False):
        """
        Cycle focus between widgets

        rev specifies the direction of the focus movement. Returns whether
        the focus switch succeeded.
        """
        if self.widget is None:
            return False
        elif not isinstance(self.widget, Box):
            # There is no container to deliver the focus to a lone leaf.
            if not self.widget.focus(rev):
                return False
            self.widget.event((FocusEvent, True))
            return True
        # When the widget is fully traversed, it de-focuses itself and
        # returns false; we wrap around by asking it to focus itself anew.
        if not self.widget.focus(rev) and not self.widget.focus(rev):
            return False
        return True
    def focus_widget(self, widget):
        """
        Move the focus to the given widget

        Returns whether the widget was found in the hierarchy and took the
        focus; the focus stays where it is otherwise.
        """
        if self.widget is None:
            return False
        elif widget is not self.widget:
            return self.widget.focus_widget(widget)
        elif isinstance(widget, Box):
            return widget.focused_child is not None or self.focus()
        # Unfocusable leaves do not consume focus events.
        return widget.event((FocusEvent, True))

class Widget(object):
    """
    Base class for all UI widgets

    A bare Widget draws nothing and can be used as a spacer (of custom
    minimum size, see cminsize) or, with an expanding size policy, as
    "glue" absorbing free space.

    Attributes:
    cminsize: The (custom) minimal size below which the widget must not
              shrink.
    size    : The size most recently assigned using resize().
    owned   : Whether a box holds this widget. Maintained by Box.
    """
    def __init__(self, **kwds):
        """
        Initializer

        Accepts configuration via keyword arguments:
        cminsize: The cminsize attribute.
        policy  : The initial size policy; a single policy (used for both
                  axes) or a (horizontal, vertical) pair.
        """
        self.cminsize = parse_pair(kwds.get('cminsize', (0, 0)))
        self.size = (0, 0)
        self.owned = False
        self._policy = (POLICY_PREFERRED, POLICY_PREFERRED)
        self.set_size_policy(*parse_pair(kwds.get('policy'),
                                         self._policy))
    def size_hint(self):
        """
        Return the natural size of this widget

        The result is never smaller than min_size_hint(). Subclasses should
        override calc_size_hint() instead of this.
        """
        return maxpos(maxpos(self.calc_size_hint(), self.cminsize),
                      self.min_size_hint())
    def min_size_hint(self):
        """
        Return the smallest size this widget can be drawn at

        Subclasses should override calc_min_size_hint() instead of this.
        """
        return maxpos(self.calc_min_size_hint(), self.cminsize)
    def calc_size_hint(self):
        """
        Compute the natural size of this widget

        The default implementation returns (0, 0).
        """
        return (0, 0)
    def calc_min_size_hint(self):
        """
        Compute the minimal size of this widget

        The default implementation returns (0, 0).
        """
        return (0, 0)
    def size_policy(self):
        "Return the (horizontal, vertical) size policy of this widget"
        return self._policy
    def set_size_policy(self, h, v):
        """
        Change the size policy of this widget

        Takes effect with the next resize() of the widget's container.
        """
        for p in (h, v):
            if not isinstance(p, SizePolicy):
                raise ValueError('Invalid size policy: %r' % (p,))
        self._policy = (h, v)
    def resize(self, size):
        """
        Assign the final size of this widget

        Negative components are clamped to zero.
        """
        self.size = (max(0, size[0]), max(0, size[1]))
    def draw(self, painter):
        """
        Draw this widget

        painter's current region is the area assigned to this widget, with
        the origin at its top-left corner. The default implementation does
        nothing.
        """
        pass
    def event(self, event):
        """
        Handle an input event

        Events are tuples, with the first item denoting the event "type" and
        subsequent elements containing additional information. The first
        element of the event can be:
        a string    : The user typed the character denoted by the string.
        a Key       : The user pressed a special key (a KEY_* constant).
        an Event    : A special event, notably FocusEvent (the second item
                      of the event then contains whether the widget is now
                      focused or not).
        The method returns whether the event has been "consumed" by the
        widget.

        The default implementation consumes nothing.
        """
        return False
    def focus(self, rev=False):
        """
        Perform focus traversal

        rev tells whether the traversal should be "forward" (rev is false)
        or "backward" (rev is true). Returns whether the traversal has
        stopped "inside" the widget and should not continue at parents.
        Widgets that are not focusable should return False unconditionally;
        widgets that only have two focus states should toggle their focus
        status and return whether they are focused now.

        The default implementation assumes an unfocusable widget.
        """
        return False
    def focus_widget(self, widget):
        """
        Move the focus to the given descendant of this widget

        Returns whether widget was found. Leaves have no descendants.
        """
        return False

class Label(Widget):
    """
    A piece of read-only text

    The text may span multiple lines. Excess space is filled with blanks
    and the text is aligned according to the align attribute (0.0 for left,
    1.0 for right, or anything in between); text not fitting into the
    widget is clipped.

    Attributes are:
    text : The text to display.
    align: The horizontal alignment of the lines.
    style: The name of the style to draw with.
    """
    def __init__(self, text='', **kwds):
        "Initializer"
        Widget.__init__(self, **kwds)
        self.text = text
        self.align = kwds.get('align', 0.0)
        self.style = kwds.get('style', 'label')
    def calc_size_hint(self):
        lines = self.text.split('\n')
        return (max(len(l) for l in lines), len(lines))
    def calc_min_size_hint(self):
        return (1, 1)
    def draw(self, painter):
        "Draw this widget"
        w, h = self.size
        painter.fill((0, 0, w, h), ' ', self.style)
        for y, l in enumerate(self.text.split('\n')[:h]):
            x = max(0, int((w - len(l)) * self.align))
            painter.draw_text((x, y), l[:w], self.style)

class Box(Widget):
    """
    A container that lays out its children along one axis

    The box assigns each child its full cross extent (less the border) and
    partitions the main axis according to the children's size hints and
    size policies (see distribute() for the precise rules).

    Children are exclusively owned by one box; adding a child that is held
    by another box is an error. Focus and key events are routed to (at most)
    one focused child.

    Attributes are:
    dir     : The layout direction (DIR_HORIZONTAL or DIR_VERTICAL).
    border  : Whether to draw a frame around the box. The frame takes one
              cell on each side.
    children: The children of this box. May be read externally, but should
              only be modified using the corresponding methods.
    """
    class Direction(Constant):
        "The axis a box lays its children out along"
    DIR_HORIZONTAL = Direction('DIR_HORIZONTAL', axis=0)
    DIR_VERTICAL = Direction('DIR_VERTICAL', axis=1)
    @classmethod
    def _shrink(cls, sizes, floors, indices, amount):
        """
        Internal layout helper

        Remove (up to) amount units from the sizes at indices, taking equal
        shares from each while keeping every one at or above its floor.
        Returns the amount that could not be removed.
        """
        while amount > 0:
            active = [i for i in indices if sizes[i] > floors[i]]
            if not active: break
            for i, d in zip(active, equal_distrib(amount, len(active))):
                d = min(d, sizes[i] - floors[i])
                sizes[i] -= d
                amount -= d
        return amount
    @classmethod
    def distribute(cls, full, hints, mins, policies):
        """
        Partition full units of space amongst children

        hints, mins, and policies are the children's size hints, minimum
        sizes, and size policies along the layout axis. Returns a list of
        sizes.

        Minimum and Maximum children get their hint (but no less than their
        minimum) and never grow; Preferred and Expanding children start at
        their hint; Ignored ones at their minimum. Surplus space is shared
        equally amongst Expanding and Ignored children, or, if there are
        none, amongst Preferred ones. Lacking space is taken from Preferred
        children first, then from Expanding ones, then from Minimum and
        Maximum ones (all down to their minimums), and finally from
        everyone down to zero. Remainders are handed to the earliest
        children first.

        The sizes add up to full except when there is surplus space and
        every child is Minimum or Maximum: as those never grow, the surplus
        is left unassigned.
        """
        if not len(hints) == len(mins) == len(policies):
            raise ValueError('Incoherent lists given to distribute().')
        full = max(0, full)
        sizes = []
        for h, m, p in zip(hints, mins, policies):
            sizes.append(m if p == POLICY_IGNORED else max(h, m))
        free = full - sum(sizes)
        if free > 0:
            growers = [i for i, p in enumerate(policies) if p.grows]
            if not growers:
                growers = [i for i, p in enumerate(policies)
                           if p == POLICY_PREFERRED]
            for i, inc in zip(growers, equal_distrib(free,
                                                     len(growers))):
                sizes[i] += inc
        elif free < 0:
            free = -free
            stages = ((POLICY_PREFERRED,), (POLICY_EXPANDING,),
                      (POLICY_MINIMUM, POLICY_MAXIMUM))
            for stage in stages:
                indices = [i for i, p in enumerate(policies) if p in stage]
                free = cls._shrink(sizes, mins, indices, free)
            if free:
                free = cls._shrink(sizes, (0,) * len(sizes),
                                   range(len(sizes)), free)
        return sizes
    def __init__(self, *children, **kwds):
        """
        Initializer

        children are added to the box in order. Accepts configuration via
        keyword arguments (in addition to those of Widget):
        dir   : The direction attribute; defaults to DIR_HORIZONTAL.
        border: The border attribute; defaults to False.
        """
        Widget.__init__(self, **kwds)
        self.dir = kwds.get('dir', self.DIR_HORIZONTAL)
        if not isinstance(self.dir, self.Direction):
            raise ValueError('Invalid box direction: %r' % (self.dir,))
        self.border = kwds.get('border', False)
        self.children = []
        self._focused = None
        self._boxes = []
        for w in children:
            self.add(w)
    def set_border(self, border):
        "Enable or disable the frame; takes effect on the next resize()"
        self.border = border
    def _pad(self):
        "Internal layout helper"
        return 1 if self.border else 0
    def _axial(self, size):
        "Internal helper: return size as a (main, cross) pair"
        return tuple(size) if self.dir.axis == 0 else (size[1], size[0])
    def _unaxial(self, main, cross):
        "Internal helper: the inverse of _axial()"
        return (main, cross) if self.dir.axis == 0 else (cross, main)
    def calc_size_hint(self):
        """
        Calculate the natural size of this box

        The sum of the children's hints along the layout axis, and their
        maximum across it, plus the border.
        """
        main, cross = 0, 0
        for w in self.children:
            p = w.size_policy()[self.dir.axis]
            if p == POLICY_IGNORED:
                s = self._axial(w.min_size_hint())
            else:
                s = self._axial(w.size_hint())
            main += s[0]
            cross = max(cross, s[1])
        pad = 2 * self._pad()
        return self._unaxial(main + pad, cross + pad)
    def calc_min_size_hint(self):
        """
        Calculate the minimal size of this box

        Minimum and Maximum children are counted with their fixed size.
        """
        main, cross = 0, 0
        for w in self.children:
            ms = self._axial(w.min_size_hint())
            if w.size_policy()[self.dir.axis].fixed:
                main += self._axial(w.size_hint())[0]
            else:
                main += ms[0]
            cross = max(cross, ms[1])
        pad = 2 * self._pad()
        return self._unaxial(main + pad, cross + pad)
    def resize(self, size):
        """
        Assign the size of this box and lay out the children

        Calling this repeatedly with the same size (and unchanged children)
        yields the same layout.
        """
        Widget.resize(self, size)
        pad = self._pad()
        main, cross = self._axial(self.size)
        main, cross = max(0, main - 2 * pad), max(0, cross - 2 * pad)
        hints, mins, policies = [], [], []
        for w in self.children:
            hints.append(self._axial(w.size_hint())[0])
            mins.append(self._axial(w.min_size_hint())[0])
            policies.append(w.size_policy()[self.dir.axis])
        sizes = self.distribute(main, hints, mins, policies)
        _LOGGER.debug('Laid out %r over %d: %r', self, main, sizes)
        self._boxes = []
        offset = pad
        for w, s in zip(self.children, sizes):
            pos = self._unaxial(offset, pad)
            wh = self._unaxial(s, cross)
            self._boxes.append((w, pos, wh))
            w.resize(wh)
            offset += s
    def draw(self, painter):
        """
        Draw this box

        Draws the border (if enabled) and then all children, each in its
        own painter region. Free space is not touched.
        """
        if self.border:
            painter.draw_rect((0, 0, self.size[0], self.size[1]),
                              'box.border')
        for w, pos, wh in self._boxes:
            painter.push((pos[0], pos[1], wh[0], wh[1]))
            try:
                w.draw(painter)
            finally:
                painter.pop()
    def event(self, event):
        """
        Process input events directed to this widget

        Handles focus events and focus traversal, and forwards other events
        to the currently focused child (if any).
        """
        if event[0] == FocusEvent:
            if not event[1]:
                self._refocus(None)
            return True
        elif event[0] == KEY_TAB:
            return self.focus()
        elif event[0] == KEY_BACKTAB:
            return self.focus(True)
        elif self._focused is not None:
            return self._focused.event(event)
        return False
    def focus(self, rev=False):
        """
        Move the focus to the next (or, if rev is true, previous) leaf

        The walk starts at the focused child, which gets the chance to move
        the focus within itself, and continues with its siblings. Once the
        last sibling in the walking direction has declined, this box loses
        the focus and False is returned, letting the caller move on (or
        wrap around).
        """
        if rev:
            stop, step = -1, -1
            start = len(self.children) - 1
        else:
            stop, step = len(self.children), 1
            start = 0
        if self._focused is not None:
            start = self.children.index(self._focused)
        for idx in range(start, stop, step):
            ch = self.children[idx]
            if ch.focus(rev):
                self._refocus(ch)
                return True
        self._refocus(None)
        return False
    def focus_widget(self, widget):
        """
        Move the focus to the given descendant of this box

        Returns False (and leaves the focus alone) if widget is not a
        descendant or cannot take the focus, like a Label or a box without
        focusable leaves.
        """
        for ch in self.children:
            if ch is widget:
                if ch is self._focused:
                    return True
                elif not ch.focus():
                    return False
                # A box has focused one of its own leaves already.
                self._refocus(ch, not isinstance(ch, Box))
                return True
            elif ch.focus_widget(widget):
                self._refocus(ch, False)
                return True
        return False
    def _refocus(self, new, notify=True):
        """
        Helper method to properly switch focus between two children

        If notify is false, the new child is assumed to have arranged its
        focus state on its own.
        """
        if new is self._focused: return
        if self._focused is not None:
            self._focused.event((FocusEvent, False))
        _LOGGER.debug('Focus in %r: %r -> %r', self, self._focused, new)
        self._focused = new
        if new is not None and notify:
            new.event((FocusEvent, True))
    @property
    def focused_child(self):
        "The child currently in charge of the focus, or None"
        return self._focused
    def add(self, widget):
        """
        Add the given widget to the end of this box

        The widget must not be held by another box. Returns the widget.
        """
        if widget.owned:
            raise ValueError('Widget %r already has an owner' % (widget,))
        widget.owned = True
        self.children.append(widget)
        return widget
    def remove(self, widget):
        "Remove the given child from this box"
        if widget not in self.children:
            raise ValueError('Widget %r is not a child of %r' % (widget,
                                                                 self))
        if self._focused is widget:
            self._refocus(None)
        self.children.remove(widget)
        self._boxes = [b for b in self._boxes if b[0] is not widget]
        widget.owned = False
    def clear(self):
        "Remove all children from this box"
        for w in self.children[:]:
            self.remove(w)

class HBox(Box):
    "A box arranging its children horizontally"
    def __init__(self, *children, **kwds):
        "Initializer"
        kwds['dir'] = self.DIR_HORIZONTAL
        Box.__init__(self, *children, **kwds)

class VBox(Box):
    "A box arranging its children vertically"
    def __init__(self, *children, **kwds):
        "Initializer"
        kwds['dir'] = self.DIR_VERTICAL
        Box.__init__(self, *children, **kwds)

class Entry(Widget):
    """
    A single-line editable text field

    The entry shows a window of its text that is as wide as the widget.
    When the entry is not focused, the window shows the tail of the text
    (or all of it if it fits). When the entry is focused, the window is
    scrolled as little as possible to contain the cursor, reserving one
    trailing cell for the cursor when it is at the end of the text.

    Keys are only processed while the entry is focused:
    characters : Inserted at the cursor position; fires the changed
                 handlers.
    Enter      : Fires the submit handlers; the text is not changed.
    Backspace  : Remove the character just before the cursor.
    Delete     : Remove the character under the cursor.
    Left/Right : Move the cursor by one position.
    Home/End   : Move the cursor to the beginning/end of the text.

    Handlers are invoked synchronously, in registration order, with the
    entry as the only argument. They are not isolated from each other (and
    may, for example, change the text).

    Attributes are:
    focused: Whether the entry is focused. Use set_focused() to change.
    cursor : The cursor position (an index into the text).
    offset : The index of the first visible character.
    """
    DEFAULT_WIDTH = 10
    def __init__(self, text='', **kwds):
        """
        Initializer

        Accepts configuration via keyword arguments (in addition to those of
        Widget):
        callback: A handler to register for submission; see on_submit().
        """
        Widget.__init__(self, **kwds)
        self.focused = False
        self.cursor = 0
        self.offset = 0
        self._text = ''
        self._changed_handlers = []
        self._submit_handlers = []
        if kwds.get('callback') is not None:
            self.on_submit(kwds['callback'])
        self.set_text(text)
    @property
    def text(self):
        """
        The textual content of this entry

        Assigning to this is equivalent to calling set_text().
        """
        return self._text
    @text.setter
    def text(self, text):
        self.set_text(text)
    def set_text(self, text):
        """
        Replace the text of this entry

        The cursor is moved to the end of the text. The changed handlers
        are not invoked.
        """
        self._text = text
        self.cursor = len(text)
        self._update_scroll()
    def set_focused(self, state):
        "Focus or unfocus this entry"
        state = bool(state)
        if state == self.focused: return
        self.focused = state
        if not state:
            self.cursor = len(self._text)
        self._update_scroll()
    def on_changed(self, callback):
        "Register a handler for text changes by the user; returns it"
        self._changed_handlers.append(callback)
        return callback
    def on_submit(self, callback):
        "Register a handler for submission by the user; returns it"
        self._submit_handlers.append(callback)
        return callback
    def _fire(self, handlers):
        "Internal helper for running handlers"
        for h in tuple(handlers):
            h(self)
    def calc_size_hint(self):
        return (len(self._text) or self.DEFAULT_WIDTH, 1)
    def calc_min_size_hint(self):
        return (1, 1)
    def resize(self, size):
        "Assign the size of this entry and re-validate the scroll offset"
        Widget.resize(self, size)
        self._update_scroll()
    def _update_scroll(self):
        """
        Internal helper restoring the scrolling invariants

        Must be invoked after any change to the text, the cursor, the
        focus state, or the size.
        """
        n, w = len(self._text), self.size[0]
        self.cursor = zbound(self.cursor, n)
        if not self.focused:
            self.offset = max(0, n - w)
        elif w <= 0:
            self.offset = self.cursor
        else:
            off = self.offset
            if self.cursor < off:
                off = self.cursor
            elif self.cursor >= off + w:
                off = self.cursor - w + 1
            # Do not leave blank columns beyond the cursor cell.
            self.offset = zbound(off, max(0, n - w + 1))
    def visible_text(self):
        "Return the part of the text currently visible"
        return self._text[self.offset:self.offset + self.size[0]]
    def draw(self, painter):
        """
        Draw this entry

        Only the first row of the assigned area is painted.
        """
        w = self.size[0]
        if w <= 0 or self.size[1] <= 0:
            return
        style = 'entry.focused' if self.focused else 'entry'
        painter.draw_text((0, 0), self.visible_text().ljust(w), style)
        if self.focused:
            x = self.cursor - self.offset
            if self.cursor < len(self._text):
                ch = self._text[self.cursor]
            else:
                ch = ' '
            painter.set_cell(x, 0, ch, 'entry.cursor')
    def focus(self, rev=False):
        "Perform focus traversal"
        return (not self.focused)
    def event(self, event):
        """
        Handle an input event

        See the class docstring for the supported keys. Returns whether the
        event was consumed; nothing is consumed while the entry is not
        focused.
        """
        if event[0] == FocusEvent:
            self.set_focused(event[1])
            return True
        if not self.focused:
            return False
        st, cp = self._text, self.cursor
        if event[0] == KEY_ENTER:
            self._fire(self._submit_handlers)
            return True
        elif event[0] == KEY_BACKSPACE:
            if cp:
                self._edit(st[:cp - 1] + st[cp:], cp - 1)
            return True
        elif event[0] == KEY_DELETE:
            if cp < len(st):
                self._edit(st[:cp] + st[cp + 1:], cp)
            return True
        elif event[0] == KEY_LEFT:
            self._move(cp - 1)
            return True
        elif event[0] == KEY_RIGHT:
            self._move(cp + 1)
            return True
        elif event[0] == KEY_HOME:
            self._move(0)
            return True
        elif event[0] == KEY_END:
            self._move(len(st))
            return True
        elif (isinstance(event[0], str) and event[0] and
                event[0].isprintable()):
            self._edit(st[:cp] + event[0] + st[cp:], cp + len(event[0]))
            return True
        return False
    def _move(self, cursor):
        "Internal editing helper"
        self.cursor = zbound(cursor, len(self._text))
        self._update_scroll()
    def _edit(self, text, cursor):
        "Internal editing helper"
        self._text = text
        self._move(cursor)
        self._fire(self._changed_handlers)
