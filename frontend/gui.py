#!/usr/bin/env python3
"""
Calculator GUI

Dark-themed Tkinter window around backend.engine.CalculatorEngine.

- The window never does arithmetic itself: buttons and keys are forwarded to the
  engine (see frontend/bindings.py) and the engine calls back with the new readout.
- The readout is grouped with thousands separators here, the engine only deals in
  raw numerals.
- Keys are bound on the window, so typing works no matter which button last had
  focus.
"""

import tkinter as tk

from backend.engine import CalculatorEngine
from backend.logging_utils import get_logger
from frontend.bindings import KEYPAD, button_action, handle_key
from frontend.display import group_thousands

logger = get_logger(__name__)


# -------------------------
# Visual theme / constants
# -------------------------
WINDOW_WIDTH = 320
WINDOW_HEIGHT = 420

BG = "#0f1113"          # main app background
PANEL_BG = "#17181A"    # panels / container background
BTN_BG = "#2b2d30"      # button tile background
OP_BG = "#34373b"       # operator / control tiles
FG = "#E6EEF3"          # foreground text (light)

TITLE_FONT = ("Segoe UI", 13, "bold")
DISPLAY_FONT = ("Consolas", 24)
BUTTON_FONT = ("Segoe UI", 16)

BORDER_SIZE = 10        # spacing between window edges and components
COMPONENT_SPACING = 2   # spacing between keypad tiles


# -------------------------
# Main application class
# -------------------------
class CalculatorGUI(tk.Tk):
    def __init__(self):
        super().__init__()

        # Window setup
        self.title("Calculator")
        self.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        self.minsize(260, 340)
        self.configure(bg=BG)

        # Backend engine instance; it reports every readout change back to us
        self.engine = CalculatorEngine(self._on_display_changed)

        self._build_header()
        self._build_display()
        self._build_keypad()

        # Keyboard input for the whole window
        self.bind("<Key>", self._on_key, add="+")

        self.display_var.set(group_thousands(self.engine.current_input))

    # -------------------------
    # Layout
    # -------------------------
    def _build_header(self):
        header = tk.Frame(self, bg=PANEL_BG, height=40)
        header.pack(fill="x", side="top")
        tk.Label(header, text="Standard", bg=PANEL_BG, fg=FG, font=TITLE_FONT).pack(side="left", padx=BORDER_SIZE, pady=6)

    def _build_display(self):
        """Right-aligned readout; a Label so it can never take keyboard focus."""
        disp = tk.Frame(self, bg=PANEL_BG)
        disp.pack(fill="x", padx=BORDER_SIZE, pady=(BORDER_SIZE, 0))
        self.display_var = tk.StringVar()
        tk.Label(disp, textvariable=self.display_var, bg=PANEL_BG, fg=FG,
                 anchor="e", font=DISPLAY_FONT).pack(fill="x", padx=6, pady=6)

    def _build_keypad(self):
        """
        Grid of equal-sized tiles. Buttons take no focus (takefocus=0) so the Return
        key never re-triggers the last clicked button instead of solving.
        """
        tile_container = tk.Frame(self, bg=PANEL_BG)
        tile_container.pack(fill="both", expand=True, padx=BORDER_SIZE, pady=BORDER_SIZE)
        for r, row in enumerate(KEYPAD):
            for c, label in enumerate(row):
                btn = tk.Button(tile_container, text=label, font=BUTTON_FONT, fg=FG,
                                bg=BTN_BG if label.isdigit() else OP_BG,
                                relief="flat", takefocus=0,
                                command=button_action(self.engine, label))
                btn.grid(row=r, column=c, sticky="nsew", padx=COMPONENT_SPACING, pady=COMPONENT_SPACING)
                tile_container.grid_columnconfigure(c, weight=1, uniform="keypad")
            tile_container.grid_rowconfigure(r, weight=1, uniform="keypad")

    # -------------------------
    # Engine <-> widgets
    # -------------------------
    def _on_display_changed(self, text: str):
        self.display_var.set(group_thousands(text))

    def _on_key(self, event):
        if handle_key(self.engine, event.char, event.keysym):
            return "break"
        logger.debug("ignored key %r (%s)", event.char, event.keysym)


# -------------------------
# Run the application
# -------------------------
def main():
    app = CalculatorGUI()
    app.mainloop()


if __name__ == "__main__":
    main()
