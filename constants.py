# ─── Constants ──────────────────────────────────────────────────────────────────
CANVAS_WIDTH = 1200 # Keep for initial window size hint
CANVAS_HEIGHT = 800 # Keep for initial window size hint
PANEL_WIDTH = 300
TOOLBAR_HEIGHT = 40

# ─── Grid & snapping ───────────────────────────────────────────────────────────
GRID_SIZE = 100
SNAP_THRESHOLD = 7
GRID_LINE_COLOR = '#000000'
GRID_LINE_WIDTH = 0.5

# Rendered outline is OUTLINE_WIDTH world units thick, centered on the geometry,
# so the visible edge sits OUTLINE_HALF outside it.
OUTLINE_WIDTH = 8
OUTLINE_HALF = OUTLINE_WIDTH / 2

# ─── Geometry clamps ───────────────────────────────────────────────────────────
MIN_RADIUS = 5
MIN_SIDE = 10
MIN_SCALE = 0.1
MAX_SCALE = 10
ZOOM_INTENSITY = 0.0015

# ─── Interaction ───────────────────────────────────────────────────────────────
HANDLE_SIZE = 12  # screen pixels
HANDLE_COLOR = '#000000'
CORNERS = ('tl', 'tr', 'bl', 'br')
PASTE_OFFSET = 40

# Pointer buttons, numbered the way Tk numbers them
BUTTON_LEFT = 1
BUTTON_MIDDLE = 2
BUTTON_RIGHT = 3

# ─── Shapes ────────────────────────────────────────────────────────────────────
SHAPE_BUTTONS = {
    'square':    '□',
    'rectangle': '▭',
    'circle':    '◯',
}
SHAPE_TYPES = list(SHAPE_BUTTONS.keys())
DEFAULT_RADIUS = 46
DEFAULT_RECT_SIZE = (192, 92)
DEFAULT_SQUARE_SIZE = 92
DEFAULT_FILL = '#e0e0e0'
DEFAULT_STROKE = '#9e9e9e'

# ─── Color panel ───────────────────────────────────────────────────────────────
DARKEN_AMOUNT = 0.2
BASIC_COLORS = [
    '#ff0000',
    '#00ff00',
    '#0000ff',
    '#ffff00',
    '#ff00ff',
    '#00ffff',
    '#000000',
    '#ffffff',
]
COLOR_PANEL_OFFSET = (150, 100)  # panel sits left of center x and above the shape top
