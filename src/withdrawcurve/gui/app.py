"""Tkinter GUI application for withdrawcurve."""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import filedialog, messagebox, scrolledtext, ttk
from typing import List, Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from ..axis import DisplayMode, Surface
from ..config import DEFAULT_INPUTS, ScenarioError
from ..logging_config import setup_logging
from ..parsing import parse_scenario
from ..render import draw_editor
from ..reporting import export_csv, format_rate_table
from ..session import EditorSession
from ..table import RateRow, TableGenerationError

logger = logging.getLogger(__name__)

SURFACE_DPI = 100


class App(tk.Tk):
    def __init__(self, surface: Optional[Surface] = None) -> None:
        super().__init__()
        self.title("Withdrawal Curve Editor")
        self.geometry("900x860")
        self._session = EditorSession(surface)
        self._mode_var = tk.StringVar(value=self._session.display_mode.value)
        self._last_table: Optional[List[RateRow]] = None

        self._build_menu()
        self._build_inputs()
        self._build_surface()
        self._build_buttons()
        self._build_text()
        self._redraw()

    # ---------- Menu / Help ----------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        helpmenu = tk.Menu(menubar, tearoff=0)
        helpmenu.add_command(label="How it works", command=self._open_help)
        menubar.add_cascade(label="Help", menu=helpmenu)
        self.config(menu=menubar)

    def _open_help(self) -> None:
        win = tk.Toplevel(self)
        win.title("Withdrawal Curve Editor — How it works")
        win.geometry("640x420")
        txt = scrolledtext.ScrolledText(win, wrap="word")
        txt.pack(fill="both", expand=True)
        txt.insert(
            "end",
            """\
HOW TO USE
----------
Scenario
• Current age, start year and plan duration set the horizontal axis.
• Reference rate (%) is the light blue line; every point starts on it.
• "Apply" resets the curve. Any edits to the previous curve are discarded.

Curve
• Drag any of the five points up or down to set the rate at that point.
• The three inner points also move sideways, but never closer than 50px
  to a neighbor. Points cannot go below the 0% axis.
• The axis labels follow the Year / Age / Plan Year selector.

Rates
• "Get Rates" samples the curve once per calendar year. Between points the
  rate is a straight line between the two neighbors, so it can differ a
  little from the smooth curve drawn on screen.
• "Export Table CSV" writes exactly what's shown.
""",
        )
        txt.config(state="disabled")

    def _build_inputs(self) -> None:
        container = ttk.Frame(self)
        container.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)

        form = ttk.LabelFrame(container, text="Scenario")
        form.pack(side=tk.TOP, fill=tk.X, pady=(0, 6))

        ttk.Label(form, text="Current age:").grid(row=0, column=0, sticky="w")
        self.ent_age = ttk.Entry(form, width=6)
        self.ent_age.insert(0, str(DEFAULT_INPUTS.current_age))
        self.ent_age.grid(row=0, column=1, padx=6, pady=4, sticky="w")

        ttk.Label(form, text="Start year:").grid(row=0, column=2, sticky="w")
        self.ent_start_year = ttk.Entry(form, width=6)
        self.ent_start_year.insert(0, str(DEFAULT_INPUTS.start_year))
        self.ent_start_year.grid(row=0, column=3, padx=6, pady=4, sticky="w")

        ttk.Label(form, text="Plan duration (years):").grid(row=0, column=4, sticky="w")
        self.ent_duration = ttk.Entry(form, width=6)
        self.ent_duration.insert(0, str(DEFAULT_INPUTS.plan_duration_years))
        self.ent_duration.grid(row=0, column=5, padx=6, pady=4, sticky="w")

        ttk.Label(form, text="Reference rate (%):").grid(row=0, column=6, sticky="w")
        self.ent_reference = ttk.Entry(form, width=6)
        self.ent_reference.insert(0, f"{DEFAULT_INPUTS.reference_withdraw_percent:.2f}")
        self.ent_reference.grid(row=0, column=7, padx=6, pady=4, sticky="w")

        ttk.Button(form, text="Apply", command=self._submit_scenario).grid(
            row=0, column=8, padx=8, pady=4
        )
        for entry in (self.ent_age, self.ent_start_year, self.ent_duration, self.ent_reference):
            entry.bind("<Return>", lambda _event: self._submit_scenario())

        modes = ttk.LabelFrame(container, text="Axis Labels")
        modes.pack(side=tk.TOP, fill=tk.X)
        for text, mode in (
            ("Year", DisplayMode.CALENDAR_YEAR),
            ("Age", DisplayMode.AGE),
            ("Plan Year", DisplayMode.PLAN_YEAR),
        ):
            ttk.Radiobutton(
                modes,
                text=text,
                value=mode.value,
                variable=self._mode_var,
                command=self._on_mode_change,
            ).pack(side=tk.LEFT, padx=6, pady=4)

    def _build_surface(self) -> None:
        surface = self._session.surface
        frm = ttk.LabelFrame(self, text="Withdrawal Curve")
        frm.pack(side=tk.TOP, padx=8, pady=6)
        self.fig = Figure(
            figsize=(surface.width / SURFACE_DPI, surface.height / SURFACE_DPI),
            dpi=SURFACE_DPI,
        )
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.canvas = FigureCanvasTkAgg(self.fig, master=frm)
        widget = self.canvas.get_tk_widget()
        widget.configure(width=surface.width, height=surface.height)
        widget.pack()
        self.canvas.mpl_connect("button_press_event", self._on_press)
        self.canvas.mpl_connect("motion_notify_event", self._on_motion)
        self.canvas.mpl_connect("button_release_event", self._on_release)
        self.canvas.mpl_connect("figure_leave_event", self._on_release)

    def _build_buttons(self) -> None:
        frm = ttk.Frame(self)
        frm.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)
        ttk.Button(frm, text="Get Rates", command=self._table_clicked).pack(side=tk.LEFT, padx=4)
        ttk.Button(frm, text="Export Table CSV", command=self._export_table_csv).pack(
            side=tk.LEFT, padx=4
        )

    def _build_text(self) -> None:
        frm = ttk.LabelFrame(self, text="Rates")
        frm.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=6)
        self.txt = scrolledtext.ScrolledText(frm, wrap="none", height=12)
        self.txt.pack(fill=tk.BOTH, expand=True)

    # ---------- drawing ----------
    def _redraw(self) -> None:
        draw_editor(self.ax, self._session)
        self.canvas.draw_idle()

    # ---------- pointer handlers ----------
    def _on_press(self, event) -> None:
        if event.button != 1 or event.xdata is None or event.ydata is None:
            return
        self._session.press(event.xdata, event.ydata)

    def _on_motion(self, event) -> None:
        if event.xdata is None or event.ydata is None:
            return
        if self._session.move(event.xdata, event.ydata):
            self._redraw()

    def _on_release(self, _event) -> None:
        self._session.release()

    # ---------- form / mode handlers ----------
    def _submit_scenario(self) -> None:
        try:
            inputs = parse_scenario(
                self.ent_age.get(),
                self.ent_start_year.get(),
                self.ent_duration.get(),
                self.ent_reference.get(),
            )
            self._session.submit(inputs)
        except ScenarioError as exc:
            messagebox.showerror("Scenario", str(exc))
            return
        self._last_table = None
        self._redraw()

    def _on_mode_change(self) -> None:
        self._session.set_display_mode(DisplayMode(self._mode_var.get()))
        self._redraw()

    # ---------- table ----------
    def _table_clicked(self) -> None:
        try:
            rows = self._session.rate_table()
        except TableGenerationError as exc:
            messagebox.showerror("Rates", str(exc))
            return
        self._last_table = rows
        cfg = self._session.config
        self.txt.configure(state="normal")
        self.txt.delete("1.0", "end")
        self.txt.insert("end", format_rate_table(rows, f"WITHDRAWAL RATES ({cfg.min_year}-{cfg.max_year})"))
        self.txt.configure(state="disabled")

    def _export_table_csv(self) -> None:
        if not self._last_table:
            messagebox.showinfo("Export", "Get the rates before exporting.")
            return
        path = filedialog.asksaveasfilename(
            title="Export CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
        )
        if not path:
            return
        export_csv(path, self._last_table)
        logger.info("Exported %d rows to %s", len(self._last_table), path)
        messagebox.showinfo("Export", f"CSV exported to {path}")


def run(log_level: int = logging.WARNING) -> None:
    setup_logging(log_level)
    App().mainloop()


__all__ = ["run", "App"]
