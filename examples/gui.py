# examples/gui.py
from __future__ import annotations

import logging
import random
import tkinter as tk
from tkinter import ttk, messagebox

from cg2d.config import OverlayConfig, argb_to_rgba, default_config
from cg2d.geom import Pt, distance
from cg2d.pipeline import FrameSummary, summarize, status_lines

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.patches import Circle as CirclePatch, Polygon, Rectangle

log = logging.getLogger(__name__)

WIDTH, HEIGHT = 1280, 800  # «екран», у пікселях


def generate_random_touches(n: int):
    """n випадкових дотиків у межах екрана (з відступом на радіус дотику)."""
    m = default_config.touch_radius
    return [Pt(random.uniform(m, WIDTH - m), random.uniform(m, HEIGHT - m)) for _ in range(n)]


class CharadeApp(tk.Tk):
    """
    Замість повноекранного X11-оверлею: полотно matplotlib, де кліки
    імітують дотики. ЛКМ — додати дотик, ПКМ — прибрати найближчий.
    """
    def __init__(self, config: OverlayConfig = default_config):
        super().__init__()
        self.title("Charade — touch geometry")
        self.geometry("1000x750")

        self.config_ = config
        self.touches: list[Pt] = []

        self.fig = None
        self.ax = None
        self.canvas = None

        self._build_widgets()
        self.redraw()

    def _build_widgets(self):
        main = ttk.Frame(self, padding=10)
        main.pack(fill="both", expand=True)

        # --- Керування ---
        ctrl = ttk.LabelFrame(main, text="Дотики")
        ctrl.pack(fill="x", pady=5)

        ttk.Label(ctrl, text="Кількість випадкових дотиків:").grid(row=0, column=0, sticky="w", padx=5, pady=5)
        self.n_entry = ttk.Entry(ctrl, width=6)
        self.n_entry.insert(0, "5")
        self.n_entry.grid(row=0, column=1, sticky="w", padx=5, pady=5)

        ttk.Button(ctrl, text="Випадкові", command=self.randomize).grid(row=0, column=2, padx=5, pady=5)
        ttk.Button(ctrl, text="Очистити", command=self.clear).grid(row=0, column=3, padx=5, pady=5)

        self.backend = tk.StringVar(value=self.config_.hull_backend)
        ttk.Radiobutton(ctrl, text="internal", variable=self.backend, value="internal",
                        command=self.redraw).grid(row=0, column=4, padx=5)
        ttk.Radiobutton(ctrl, text="scipy", variable=self.backend, value="scipy",
                        command=self.redraw).grid(row=0, column=5, padx=5)

        # --- Результати ---
        result = ttk.LabelFrame(main, text="Результати")
        result.pack(fill="x", pady=5)
        self.circle_var = tk.StringVar(value="—")
        self.hull_var = tk.StringVar(value="—")
        self.rect_var = tk.StringVar(value="—")
        for row, (label, var) in enumerate((
            ("Коло:", self.circle_var),
            ("Оболонка:", self.hull_var),
            ("Прямокутник:", self.rect_var),
        )):
            ttk.Label(result, text=label).grid(row=row, column=0, sticky="w", padx=5, pady=2)
            ttk.Label(result, textvariable=var).grid(row=row, column=1, sticky="w", padx=5, pady=2)

        # --- Полотно ---
        plot_frame = ttk.LabelFrame(main, text="Оверлей")
        plot_frame.pack(fill="both", expand=True, pady=5)

        self.fig = Figure(figsize=(8, 5))
        self.ax = self.fig.add_subplot(111)
        self.canvas = FigureCanvasTkAgg(self.fig, master=plot_frame)
        self.canvas.get_tk_widget().pack(fill="both", expand=True)
        self.canvas.mpl_connect("button_press_event", self.on_click)

    # ---------- події ----------
    def on_click(self, event):
        if event.inaxes is not self.ax or event.xdata is None:
            return
        p = Pt(float(event.xdata), float(event.ydata))
        if event.button == 1:
            self.touches.append(p)
        elif event.button == 3 and self.touches:
            nearest = min(range(len(self.touches)), key=lambda i: distance(self.touches[i], p))
            # як у таблиці слотів: на місце видаленого стає останній
            self.touches[nearest] = self.touches[-1]
            self.touches.pop()
        self.redraw()

    def randomize(self):
        try:
            n = int(self.n_entry.get())
            if n < 0:
                raise ValueError
        except ValueError:
            messagebox.showerror("Помилка", "Кількість дотиків має бути невід’ємним цілим числом.")
            return
        self.touches = generate_random_touches(n)
        self.redraw()

    def clear(self):
        self.touches = []
        self.redraw()

    # ---------- малювання ----------
    def redraw(self):
        try:
            summary = summarize(self.touches, backend=self.backend.get(), config=self.config_)
        except (ValueError, RuntimeError) as e:
            messagebox.showerror("Помилка виконання", str(e))
            return
        self.update_plot(summary)
        self.update_labels(summary)

    def update_plot(self, s: FrameSummary):
        cfg = self.config_
        ax = self.ax
        ax.clear()
        ax.set_facecolor(argb_to_rgba(cfg.background_color))
        ax.set_xlim(0, WIDTH)
        ax.set_ylim(HEIGHT, 0)  # y вниз, як на екрані
        ax.set_aspect("equal")

        touch = argb_to_rgba(cfg.touch_color)
        analysis = argb_to_rgba(cfg.analysis_color)

        for p in self.touches:
            ax.add_patch(CirclePatch((p.x, p.y), cfg.touch_radius, color=touch))

        if s.count:
            c = s.centroid
            ax.add_patch(Rectangle((c.x - cfg.center_radius, c.y - cfg.center_radius),
                                   2 * cfg.center_radius, 2 * cfg.center_radius, color=analysis))
            ax.add_patch(CirclePatch((s.circle.c.x, s.circle.c.y), s.circle.r,
                                     fill=False, edgecolor=analysis, linewidth=2))
        if len(s.hull) >= 2:
            ax.add_patch(Polygon([tuple(p) for p in s.hull], closed=True,
                                 fill=False, edgecolor=analysis, linestyle="--"))
        if s.rect is not None:
            ax.add_patch(Polygon([tuple(p) for p in s.rect], closed=True,
                                 fill=False, edgecolor=touch, linewidth=1.5))

        text = argb_to_rgba(cfg.text_color)
        for i, line in enumerate(reversed(status_lines(s, cfg.text_precision))):
            ax.text(10, HEIGHT - 10 - 50 * i, line, color=text, fontsize=14, family="monospace")

        self.canvas.draw()

    def update_labels(self, s: FrameSummary):
        if s.circle is None:
            self.circle_var.set("—")
        else:
            self.circle_var.set(f"({s.circle.c.x:.1f}, {s.circle.c.y:.1f}), r = {s.circle.r:.1f}")
        self.hull_var.set(f"{len(s.hull)} вершин, площа {s.hull_area:.1f}")
        if s.rect_size is None:
            self.rect_var.set("—")
        else:
            self.rect_var.set(f"{s.rect_size[0]:.1f} × {s.rect_size[1]:.1f}")
        log.debug("frame redrawn: %s", status_lines(s))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = CharadeApp()
    app.mainloop()
