"""Tkinter front-end for treegen.

The main window holds a path entry, Browse/Generate/Filter/Copy buttons and a
read-only text area showing the diagram. The filter window lists the tree with a
checkbox per entry; toggling an entry toggles its whole subtree. Apply prunes the
unchecked entries from the displayed tree, Cancel leaves it unchanged.
"""

import tkinter as tk
import uuid
from tkinter import messagebox, ttk
from typing import Dict, Optional

from anytree import PreOrderIter

from treegen.app_state import ApplicationState
from treegen.clipboard import copy_to_clipboard
from treegen.dialogs import pick_directory
from treegen.exceptions import ClipboardError, DirectoryPickerError
from treegen.file_system_tree.tree_node import TreeNode

CHECKED = "[x]"
UNCHECKED = "[ ]"


class FilterWindow(tk.Toplevel):
    """Checkbox tree for choosing which entries stay in the diagram."""

    def __init__(self, app: "TreeGenApp", working_copy: TreeNode) -> None:
        super().__init__(app.root)
        self.app = app
        self.working_copy = working_copy
        self.title("Filter entries")
        self.geometry("480x560")
        self.transient(app.root)
        self.protocol("WM_DELETE_WINDOW", self._on_cancel)

        self._nodes: Dict[str, TreeNode] = {}

        frame = ttk.Frame(self, padding=10)
        frame.pack(fill="both", expand=True)

        self.tree = ttk.Treeview(frame, show="tree", selectmode="browse")
        scrollbar = ttk.Scrollbar(frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        self.tree.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        buttons = ttk.Frame(self, padding=(10, 0, 10, 10))
        buttons.pack(fill="x")
        ttk.Button(buttons, text="Apply", command=self._on_apply).pack(side="right")
        ttk.Button(buttons, text="Cancel", command=self._on_cancel).pack(side="right", padx=(0, 5))

        self.tree.bind("<space>", self._on_toggle)
        self.tree.bind("<Double-Button-1>", self._on_toggle)

        self._populate(working_copy, "")

    def _populate(self, node: TreeNode, parent_iid: str) -> None:
        iid = str(node.identity)
        self._nodes[iid] = node
        self.tree.insert(parent_iid, "end", iid=iid, text=self._label(node), open=not parent_iid)
        for child in node.children:
            self._populate(child, iid)

    @staticmethod
    def _label(node: TreeNode) -> str:
        return f"{CHECKED if node.is_included else UNCHECKED} {node.name}"

    def is_current(self) -> bool:
        """Whether this window still edits the state's working copy."""
        return self.working_copy is self.app.state.working_copy

    def _on_toggle(self, event: tk.Event) -> str:
        if not self.is_current():
            self.close()
            return "break"
        for iid in self.tree.selection():
            node = self._nodes[iid]
            self.app.state.toggle(uuid.UUID(iid), not node.is_included)
            for descendant in PreOrderIter(node):
                self.tree.item(str(descendant.identity), text=self._label(descendant))
        return "break"

    def _on_apply(self) -> None:
        if self.is_current():
            self.app.state.apply_filter()
            self.app.show_tree_text()
        self.close()

    def _on_cancel(self) -> None:
        if self.is_current():
            self.app.state.cancel_filter()
        self.close()

    def close(self) -> None:
        if self.app.filter_window is self:
            self.app.filter_window = None
        self.destroy()


class TreeGenApp:
    """Main window wiring user events to an ApplicationState."""

    def __init__(self, root: tk.Tk, state: Optional[ApplicationState] = None) -> None:
        self.root = root
        self.state = state if state is not None else ApplicationState()
        self.filter_window: Optional[FilterWindow] = None
        self.root.title("TreeGen")
        self.root.geometry("760x620")

        self.path_var = tk.StringVar(value=self.state.folder_path)
        self.status_var = tk.StringVar()

        top = ttk.Frame(root, padding=10)
        top.pack(fill="x")
        entry = ttk.Entry(top, textvariable=self.path_var)
        entry.pack(side="left", fill="x", expand=True)
        entry.bind("<Return>", lambda e: self.on_generate())
        ttk.Button(top, text="Browse...", command=self.on_browse).pack(side="left", padx=(5, 0))

        actions = ttk.Frame(root, padding=(10, 0))
        actions.pack(fill="x")
        ttk.Button(actions, text="Generate Tree", command=self.on_generate).pack(side="left")
        ttk.Button(actions, text="Filter...", command=self.on_filter).pack(side="left", padx=5)
        ttk.Button(actions, text="Copy", command=self.on_copy).pack(side="left")

        body = ttk.Frame(root, padding=10)
        body.pack(fill="both", expand=True)
        self.text = tk.Text(body, wrap="none", font=("Courier", 11), state="disabled")
        yscroll = ttk.Scrollbar(body, orient="vertical", command=self.text.yview)
        xscroll = ttk.Scrollbar(body, orient="horizontal", command=self.text.xview)
        self.text.configure(yscrollcommand=yscroll.set, xscrollcommand=xscroll.set)
        yscroll.pack(side="right", fill="y")
        xscroll.pack(side="bottom", fill="x")
        self.text.pack(side="left", fill="both", expand=True)

        ttk.Label(root, textvariable=self.status_var, anchor="w", padding=(10, 0, 10, 5)).pack(fill="x")

    def show_tree_text(self) -> None:
        self.text.configure(state="normal")
        self.text.delete("1.0", "end")
        self.text.insert("1.0", self.state.tree_text)
        self.text.configure(state="disabled")

    def on_browse(self) -> None:
        try:
            chosen = self.state.choose_directory(lambda: pick_directory(parent=self.root))
        except DirectoryPickerError as e:
            messagebox.showerror("TreeGen", str(e), parent=self.root)
            return
        if chosen is not None:
            self.path_var.set(str(chosen))
            self.on_generate()

    def on_generate(self) -> None:
        self.state.set_folder_path(self.path_var.get().strip())
        try:
            self.state.generate_tree()
        except (OSError, ValueError) as e:
            self.status_var.set(f"Error: {e}")
            return
        self.status_var.set("")
        self.show_tree_text()

    def on_filter(self) -> None:
        # At most one filter window, bound to the state's current working copy.
        window = self.filter_window
        if window is not None and window.winfo_exists():
            if window.is_current():
                window.lift()
                window.focus_set()
                return
            window.close()
        try:
            working_copy = self.state.begin_filter()
        except ValueError as e:
            self.status_var.set(str(e))
            return
        self.filter_window = FilterWindow(self, working_copy)

    def on_copy(self) -> None:
        try:
            self.state.copy_to_clipboard(copy_to_clipboard)
        except (ClipboardError, ValueError) as e:
            self.status_var.set(f"Error: {e}")
            return
        self.status_var.set("Copied to clipboard.")


def main() -> None:
    """Entry point for the treegen-gui command."""
    root = tk.Tk()
    TreeGenApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
