# view.py

import logging
import tkinter as tk       # For core Tkinter widgets and functionality
from tkinter import ttk, messagebox, colorchooser
from typing import Dict, Optional

from constants import (CANVAS_WIDTH, CANVAS_HEIGHT, TOOLBAR_HEIGHT, SHAPE_BUTTONS, BASIC_COLORS,
                       BUTTON_LEFT, BUTTON_MIDDLE, BUTTON_RIGHT)
from renderer import SceneRenderer, color_panel_anchor
from utils.errors import InvalidColorError

log = logging.getLogger(__name__)

# Tk sets this bit of event.state while Control is held
_CONTROL_MASK = 0x0004
# Wheel notches on X11 arrive as buttons 4/5 without a delta
_X11_WHEEL_DELTA = 120

# --- View - Handles UI and Drawing ────────────────────────────────────────────


class ColorPanel(tk.Frame):
    """Swatches plus a hex entry. Previews on hover, commits on click or Return."""

    def __init__(self, master, controller):
        super().__init__(master, bd=1, relief=tk.RAISED, padx=6, pady=6)
        self.controller = controller
        self._synced = None

        ttk.Label(self, text="Pick a color:").grid(row=0, column=0, columnspan=len(BASIC_COLORS), sticky="w")
        for col, color in enumerate(BASIC_COLORS):
            swatch = tk.Button(self, bg=color, activebackground=color, width=2,
                               command=lambda c=color: self._commit(c))
            swatch.grid(row=1, column=col, padx=1)
            swatch.bind("<Enter>", lambda e, c=color: self.controller.preview_color(c))
            swatch.bind("<Leave>", lambda e: self._reset_preview())

        self.hex_var = tk.StringVar()
        entry = ttk.Entry(self, textvariable=self.hex_var, width=10)
        entry.grid(row=2, column=0, columnspan=4, sticky="we", pady=(4, 0))
        entry.bind("<Return>", lambda e: self._commit(self.hex_var.get()))
        ttk.Button(self, text="More...", command=self._choose).grid(
            row=2, column=4, columnspan=4, sticky="we", pady=(4, 0))

    def sync(self, shape):
        # Only overwrite the entry when the shape itself changed, not on every redraw
        if shape is not None and shape is not self._synced:
            self.hex_var.set(shape.fill_color)
        self._synced = shape

    def _reset_preview(self):
        shape = self.controller.selection.shape
        if shape is not None:
            self.controller.preview_color(shape.fill_color)

    def _choose(self):
        shape = self.controller.selection.shape
        initial = shape.fill_color if shape is not None else None
        _, hex_color = colorchooser.askcolor(color=initial, parent=self)
        if hex_color:
            self._commit(hex_color)

    def _commit(self, color: str):
        try:
            self.controller.commit_color(color.strip())
        except InvalidColorError as e:
            messagebox.showerror("Invalid color", str(e), parent=self)


class DrawingView(tk.Frame):
    def __init__(self, master, controller):
        super().__init__(master)
        self.controller = controller # View holds a reference to the Controller
        self.pack(fill=tk.BOTH, expand=True)

        self.renderer = SceneRenderer(controller.model, controller.viewport, controller.selection)
        self._tool_buttons: Dict[str, tk.Button] = {}

        # Build UI
        self._build_ui()

        # Bind events to controller methods
        self._bind_events()

        # Redraw whenever the engine reports a change
        self.controller.add_observer(self.refresh_all)

        master.title("snapcanvas")
        master.geometry(f"{CANVAS_WIDTH}x{CANVAS_HEIGHT + TOOLBAR_HEIGHT}")
        master.protocol("WM_DELETE_WINDOW", self._confirm_close)

    def _build_ui(self):
        # Toolbar
        self.toolbar = tk.Frame(self, height=TOOLBAR_HEIGHT, bd=1, relief=tk.RAISED)
        self.toolbar.pack(side=tk.TOP, fill=tk.X)
        # Buttons call controller methods
        for tool, glyph in SHAPE_BUTTONS.items():
            btn = tk.Button(self.toolbar, text=glyph, width=3,
                            command=lambda t=tool: self._on_tool_button(t))
            btn.pack(side=tk.LEFT, padx=2)
            self._tool_buttons[tool] = btn
        self.delete_button = tk.Button(self.toolbar, text="Delete", command=self._on_delete_button)
        self.delete_button.pack(side=tk.LEFT, padx=(12, 2))
        tk.Button(self.toolbar, text="Clear All", command=self.controller.clear_all).pack(side=tk.LEFT, padx=2)

        self.canvas = tk.Canvas(self, bg="white", width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                                highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.color_panel = ColorPanel(self.canvas, self.controller)

    def _bind_events(self):
        # Canvas events
        self.canvas.bind("<ButtonPress-1>", lambda e: self._on_press(e, BUTTON_LEFT))
        self.canvas.bind("<ButtonPress-2>", lambda e: self._on_press(e, BUTTON_MIDDLE))
        self.canvas.bind("<ButtonPress-3>", lambda e: self._on_press(e, BUTTON_RIGHT))
        self.canvas.bind("<Motion>", lambda e: self.controller.on_pointer_move(e.x, e.y))
        self.canvas.bind("<Double-Button-1>", lambda e: self.controller.on_double_click(e.x, e.y))
        self.canvas.bind("<MouseWheel>", self._on_wheel)
        self.canvas.bind("<Button-4>", lambda e: self._on_x11_wheel(e, -_X11_WHEEL_DELTA))
        self.canvas.bind("<Button-5>", lambda e: self._on_x11_wheel(e, _X11_WHEEL_DELTA))
        self.canvas.bind("<Configure>", lambda e: self.refresh_all())

        # Releases anywhere in the application end the interaction,
        # including when the pointer left the canvas mid-drag
        for n in (1, 2, 3):
            self.master.bind_all(f"<ButtonRelease-{n}>", lambda e: self.controller.on_pointer_up())

        # Bind hotkeys to controller methods (bind_all because events can happen anywhere)
        self.master.bind_all("<Control-Key-0>", lambda e: self._on_key(e, "0", True))
        self.master.bind_all("<Control-c>", lambda e: self._on_key(e, "c", True))
        self.master.bind_all("<Control-v>", lambda e: self._on_key(e, "v", True))
        self.master.bind_all("<Delete>", lambda e: self._on_key(e, "Delete", False))
        self.master.bind_all("<BackSpace>", lambda e: self._on_key(e, "BackSpace", False))
        # Add Cmd bindings for Mac users
        self.master.bind_all("<Command-Key-0>", lambda e: self._on_key(e, "0", True))
        self.master.bind_all("<Command-c>", lambda e: self._on_key(e, "c", True))
        self.master.bind_all("<Command-v>", lambda e: self._on_key(e, "v", True))

    # --- Event adapters ---

    def _on_press(self, event, button: int):
        self.canvas.focus_set()
        self.controller.on_pointer_down(event.x, event.y, button)

    def _on_wheel(self, event):
        # Tk reports wheel-up as a positive delta, the engine expects scroll-down positive
        self.controller.on_wheel(event.x, event.y, -event.delta, bool(event.state & _CONTROL_MASK))

    def _on_x11_wheel(self, event, delta_y: int):
        self.controller.on_wheel(event.x, event.y, delta_y, bool(event.state & _CONTROL_MASK))

    def _on_key(self, event, key: str, ctrl: bool):
        # Let text fields keep their own editing keys
        if isinstance(event.widget, (tk.Entry, ttk.Entry)):
            return None
        if self.controller.on_key(key, ctrl):
            return "break"
        return None

    def _on_tool_button(self, tool: str):
        new_tool: Optional[str] = None if self.controller.current_tool == tool else tool
        self.controller.select_tool(new_tool)

    def _on_delete_button(self):
        self.controller.set_delete_mode(not self.controller.delete_mode)

    def _confirm_close(self):
        if not len(self.controller.model) or messagebox.askokcancel("Quit", "Close the canvas? Shapes are not saved."):
            self.master.destroy()

    # --- Redraw ---

    def refresh_all(self):
        """Redraws the canvas and syncs toolbar and color panel with the engine state."""
        width, height = self.canvas.winfo_width(), self.canvas.winfo_height()
        if width <= 1 or height <= 1:
            width, height = CANVAS_WIDTH, CANVAS_HEIGHT
        self.renderer.draw(width, height, canvas=self.canvas)

        for tool, btn in self._tool_buttons.items():
            btn.config(relief=tk.SUNKEN if self.controller.current_tool == tool else tk.RAISED)
        self.delete_button.config(relief=tk.SUNKEN if self.controller.delete_mode else tk.RAISED)

        selection = self.controller.selection
        shape = selection.shape
        if selection.panel_visible and shape is not None:
            x, y = color_panel_anchor(shape, self.controller.viewport)
            self.color_panel.place(x=x, y=y)
            self.color_panel.lift()
            self.color_panel.sync(shape)
        else:
            self.color_panel.place_forget()
