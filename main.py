"""
Entry point: build the store, controller and Tk window, then run the main loop.

    python main.py            # hosted table from SUPABASE_URL / SUPABASE_ANON_KEY (.env)
    python main.py --memory   # in-process table, nothing leaves the machine
"""

import argparse
import logging
import sys
import tkinter as tk

from shopcolor.config import (
    LOG_LEVEL,
    REQUEST_TIMEOUT_SEC,
    SHOPS_TABLE,
    SUPABASE_ANON_KEY,
    SUPABASE_URL,
)
from shopcolor.controller import ShopListController
from shopcolor.logger import setup_logging
from shopcolor.repository import MemoryShopStore
from shopcolor.store import SupabaseShopStore
from shopcolor.ui import AppUI

log = logging.getLogger("shopcolor.main")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shop Color: add, list and delete shops with a favorite color.")
    parser.add_argument("--memory", action="store_true", help="use an in-memory table instead of Supabase")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="DEBUG, INFO, WARNING or ERROR (default: %(default)s)")
    return parser.parse_args(argv)


def build_store(use_memory: bool):
    if use_memory:
        log.info("Using in-memory shop table")
        return MemoryShopStore()
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        raise SystemExit("SUPABASE_URL and SUPABASE_ANON_KEY must be set (see .env.example), or pass --memory.")
    log.info("Using Supabase table %s at %s", SHOPS_TABLE, SUPABASE_URL)
    return SupabaseShopStore(SUPABASE_URL, SUPABASE_ANON_KEY, table=SHOPS_TABLE, timeout=REQUEST_TIMEOUT_SEC)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    store = build_store(args.memory)

    root = tk.Tk()
    controller = ShopListController(store)
    app = AppUI(root, controller)

    def on_close():
        close = getattr(store, "close", None)
        if close is not None:
            close()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    app.start()
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
