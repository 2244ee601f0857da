"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (form, Treeview list, notices) on top of ShopListController.
- Inputs: ShopListController (shared state + operations).
- Outputs: None (renders UI, triggers controller operations).
- Side effects: Creates windows; shows message boxes; raises desktop notifications via plyer.
- Thread-safety: UI code runs on the main thread. Controller operations run in BackgroundTask
                 threads; their callbacks are posted back with Tk.after().
"""

import logging
import tkinter as tk
from tkinter import ttk, messagebox

from plyer import notification

from .config import (
    APP_TITLE,
    DELETE_LABEL,
    EMPTY_TEXT,
    ENABLE_NOTIFICATIONS,
    LOADING_TEXT,
    NOTIFICATION_TIMEOUT_SEC,
    SWATCH_SIZE,
)
from .controller import ShopListController
from .utils import cell_hit, color_label, heading_text, swatch_color
from .worker import BackgroundTask

log = logging.getLogger(__name__)

BG = "#1e1e1e"
PANEL = "#2b2b2b"
FG = "#f0f0f0"


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        name_var, color_var (tk.StringVar): form fields, mirrored into the controller
        enable_notifications (tk.BooleanVar): toggles desktop notifications for failed deletes
    - Public methods:
        start(): initial load
        schedule_refresh(): thread-safe repaint request (controller on_change)
        show_notice(): thread-safe blocking notice (controller show_notice)
        notify_failure(): thread-safe desktop notification (controller notify_failure)
    """

    def __init__(self, root: tk.Tk, controller: ShopListController):
        self.root = root
        self.controller = controller
        controller.on_change = self.schedule_refresh
        controller.show_notice = self.show_notice
        controller.notify_failure = self.notify_failure

        self.name_var = tk.StringVar()
        self.color_var = tk.StringVar()
        self.enable_notifications = tk.BooleanVar(value=ENABLE_NOTIFICATIONS)
        self.name_var.trace_add("write", lambda *_: controller.set_inputs(name=self.name_var.get()))
        self.color_var.trace_add("write", lambda *_: controller.set_inputs(color=self.color_var.get()))
        # Tk drops images that are not referenced from Python; keep one per color
        self._swatches: dict[str, tk.PhotoImage] = {}

        # Window
        self.root.title(APP_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg=BG)
        self.root.minsize(520, 360)

        content = tk.Frame(self.root, bg=BG)
        content.grid(row=0, column=0, sticky="nsew", padx=10, pady=10)
        content.columnconfigure(0, weight=1)
        content.rowconfigure(3, weight=1)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure(
            "Treeview",
            background=PANEL,
            foreground=FG,
            fieldbackground=PANEL,
            rowheight=26,
            font=("Segoe UI", 10),
        )
        style.configure(
            "Treeview.Heading",
            background=BG,
            foreground="#ffffff",
            font=("Segoe UI", 10, "bold"),
        )
        style.map("Treeview", background=[('selected', '#444')], foreground=[])

        tk.Label(content, text=f"{APP_TITLE} 🛍️", fg="white", bg=BG,
                 font=("Segoe UI", 18, "bold")).grid(row=0, column=0, sticky="w", pady=(0, 10))

        # Form: Name, Favorite color, Add
        form = tk.Frame(content, bg=BG)
        form.grid(row=1, column=0, sticky="ew", pady=(0, 10))
        form.columnconfigure(1, weight=1)
        form.columnconfigure(3, weight=1)

        tk.Label(form, text="Name", fg="white", bg=BG).grid(row=0, column=0, sticky="e", padx=5)
        self.name_entry = tk.Entry(form, textvariable=self.name_var)
        self.name_entry.grid(row=0, column=1, sticky="ew", padx=5)

        tk.Label(form, text="Favorite color", fg="white", bg=BG).grid(row=0, column=2, sticky="e", padx=5)
        self.color_entry = tk.Entry(form, textvariable=self.color_var)
        self.color_entry.grid(row=0, column=3, sticky="ew", padx=5)

        self.add_button = ttk.Button(form, text="Add", command=self.add_shop)
        self.add_button.grid(row=0, column=4, padx=5)

        for entry in (self.name_entry, self.color_entry):
            entry.bind("<Return>", self.on_key)
            entry.bind("<KP_Enter>", self.on_key)

        self.heading = tk.Label(content, text=heading_text(0), fg="white", bg=BG, font=("Segoe UI", 12, "bold"))
        self.heading.grid(row=2, column=0, sticky="w", pady=(0, 5))

        # Treeview: the tree column (#0) holds the color swatch image
        self.columns = ("name", "color", "delete")
        self.tree = ttk.Treeview(content, columns=self.columns, show=("tree", "headings"), selectmode="browse")
        self.tree.grid(row=3, column=0, sticky="nsew")
        self.tree.column("#0", width=44, stretch=False, anchor="center")
        headers = {"name": "Name", "color": "Favorite color", "delete": ""}
        widths = {"name": 200, "color": 160, "delete": 80}
        for col in self.columns:
            self.tree.heading(col, text=headers[col])
            self.tree.column(col, width=widths[col], stretch=col != "delete", anchor="w")

        # Empty/loading text sits on top of the (empty) tree
        self.placeholder = tk.Label(content, text=EMPTY_TEXT, fg="#9e9e9e", bg=PANEL, font=("Segoe UI", 10, "italic"))
        self.placeholder.grid(row=3, column=0)

        self.tree.bind("<Button-1>", self.on_single_click)
        self.tree.bind("<Delete>", lambda _e: self.delete_selected())

        # Buttons & toggles
        button_frame = tk.Frame(content, bg=BG)
        button_frame.grid(row=4, column=0, sticky="ew", pady=(10, 0))
        self.refresh_button = ttk.Button(button_frame, text="Refresh", command=self.reload)
        self.refresh_button.pack(side=tk.LEFT, padx=5)
        self.delete_button = ttk.Button(button_frame, text="Delete Selected", command=self.delete_selected)
        self.delete_button.pack(side=tk.LEFT, padx=5)
        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg=BG,
            selectcolor=PANEL,
            activebackground=BG,
            activeforeground="white",
        ).pack(side=tk.LEFT, padx=5)

        self.refresh_ui()

    # ---------- Public API for the controller ----------

    def start(self) -> None:
        self.reload()

    def schedule_refresh(self) -> None:
        """Safe to call from any thread; repaints on the main thread via Tk.after()."""
        self.root.after(0, self.refresh_ui)

    def show_notice(self, message: str) -> None:
        self.root.after(0, lambda: messagebox.showwarning(APP_TITLE, message, parent=self.root))

    def notify_failure(self, title: str, message: str) -> None:
        self.root.after(0, lambda: self._desktop_notify(title, message))

    # ---------- user actions ----------

    def reload(self) -> None:
        self._run(self.controller.load_all)

    def add_shop(self) -> None:
        self._run(self.controller.add_shop)

    def on_key(self, event) -> str:
        self._run(self.controller.submit_on_enter, event.keysym)
        return "break"

    def delete_selected(self) -> None:
        selected = self.tree.selection()
        if not selected:
            messagebox.showinfo("Delete Shop", "Select a shop to delete.", parent=self.root)
            return
        self._run(self.controller.delete_shop, int(selected[0]))

    def on_single_click(self, event) -> None:
        """Delete the row when its Delete label is clicked."""
        if self.tree.identify("region", event.x, event.y) != "cell":
            return
        row_id = self.tree.identify_row(event.y)
        col_id = self.tree.identify_column(event.x)
        if not row_id or not col_id:
            return
        if int(col_id[1:]) - 1 != self.columns.index("delete"):
            return
        if not cell_hit(self.tree.bbox(row_id, col_id), event.x):
            return
        self._run(self.controller.delete_shop, int(row_id))

    # ---------- rendering ----------

    def refresh_ui(self) -> None:
        """
        Purpose: Repaint heading, form state and rows from the controller snapshot.
        Thread-safety: Main thread only (use schedule_refresh from other threads).
        """
        shops, busy = self.controller.snapshot()

        self.heading.configure(text=heading_text(len(shops)))

        # Pick up cleared inputs after a successful add
        name, color = self.controller.inputs()
        if name != self.name_var.get():
            self.name_var.set(name)
        if color != self.color_var.get():
            self.color_var.set(color)

        entry_state = "disabled" if busy else "normal"
        self.name_entry.configure(state=entry_state)
        self.color_entry.configure(state=entry_state)
        for button in (self.add_button, self.refresh_button, self.delete_button):
            button.state(["disabled"] if busy else ["!disabled"])
        self.add_button.configure(text="..." if busy else "Add")

        self.tree.delete(*self.tree.get_children())
        for shop in shops:
            if shop.id is None:
                continue
            fill = swatch_color(shop.favorite_color, self._rgb)
            self.tree.insert("", "end", iid=str(shop.id), image=self._swatch(fill),
                             values=(shop.name, color_label(shop), DELETE_LABEL))

        if shops:
            self.placeholder.grid_remove()
        else:
            self.placeholder.configure(text=LOADING_TEXT if busy else EMPTY_TEXT)
            self.placeholder.grid()

    # ---------- internals ----------

    def _run(self, operation, *args) -> None:
        _, busy = self.controller.snapshot()
        if busy:
            return
        BackgroundTask(operation, *args, schedule=lambda fn: self.root.after(0, fn),
                       on_done=lambda _result: self.refresh_ui()).start()

    def _swatch(self, fill: str) -> tk.PhotoImage:
        key = fill.lower()
        image = self._swatches.get(key)
        if image is None:
            image = tk.PhotoImage(master=self.root, width=SWATCH_SIZE, height=SWATCH_SIZE)
            image.put("#d0d0d0", to=(0, 0, SWATCH_SIZE, SWATCH_SIZE))
            image.put(fill, to=(2, 2, SWATCH_SIZE - 2, SWATCH_SIZE - 2))
            self._swatches[key] = image
        return image

    def _rgb(self, color: str) -> tuple[int, int, int] | None:
        try:
            return self.root.winfo_rgb(color)
        except tk.TclError:
            return None

    def _desktop_notify(self, title: str, message: str) -> None:
        if not self.enable_notifications.get():
            return
        try:
            notification.notify(title=title, message=message, app_name=APP_TITLE, timeout=NOTIFICATION_TIMEOUT_SEC)
        except Exception:
            # plyer has no backend on some platforms (e.g. Linux without D-Bus)
            log.warning("Desktop notification unavailable: %s: %s", title, message, exc_info=True)
