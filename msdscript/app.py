"""Graphical front end for evaluating and pretty printing MSDscript."""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Any

from msdscript.env import empty_env
from msdscript.errors import MSDScriptError
from msdscript.parse import parse_str


class Mode(Enum):
    """What to do with a submitted expression."""

    INTERP = "interp"
    PRETTY_PRINT = "pretty_print"


def run(text: str, mode: Mode = Mode.INTERP) -> str:
    """Parse ``text`` and either evaluate it or pretty print it."""
    expr = parse_str(text)
    if mode is Mode.INTERP:
        return expr.interp(empty_env()).to_string()
    return expr.to_pretty_string()


class MainWindow:
    """The expression entry window."""

    def __init__(self, root: Any) -> None:
        import tkinter as tk

        self.root = root
        self.mode = tk.StringVar(master=root, value=Mode.INTERP.value)

        root.configure(background="#e6e6e6")
        frame = tk.Frame(root, background="#e6e6e6", padx=10, pady=10)
        frame.pack(fill=tk.BOTH, expand=True)

        def label(text: str, **options: Any) -> tk.Label:
            return tk.Label(frame, text=text, background="#e6e6e6", **options)

        label("MSDscript: A Program Interface", font=("TkDefaultFont", 14, "bold")).pack()
        label("Enter Expression:", font=("TkDefaultFont", 10, "bold")).pack(anchor=tk.W)
        self.expression_input = tk.Text(frame, height=10, background="white")
        self.expression_input.pack(fill=tk.BOTH, expand=True)

        choose = tk.Frame(frame, background="#e6e6e6")
        choose.pack(fill=tk.X, pady=4)
        tk.Label(
            choose, text="Choose:", background="#e6e6e6", font=("TkDefaultFont", 10, "bold")
        ).pack(side=tk.LEFT, anchor=tk.N)
        radios = tk.Frame(choose, background="#e6e6e6")
        radios.pack(side=tk.LEFT)
        for text, mode in (("Interp", Mode.INTERP), ("Pretty Print", Mode.PRETTY_PRINT)):
            tk.Radiobutton(
                radios,
                text=text,
                variable=self.mode,
                value=mode.value,
                background="#e6e6e6",
            ).pack(anchor=tk.W)

        tk.Button(frame, text="Submit", width=8, command=self.submit).pack(anchor=tk.W)
        label("Results:", font=("TkDefaultFont", 10, "bold")).pack(anchor=tk.W)
        self.results_output = tk.Text(frame, height=10, background="white", state=tk.DISABLED)
        self.results_output.pack(fill=tk.BOTH, expand=True)
        tk.Button(frame, text="Reset", width=8, command=self.reset).pack(anchor=tk.W)

    def _set_results(self, text: str) -> None:
        self.results_output.configure(state="normal")
        self.results_output.delete("1.0", "end")
        self.results_output.insert("1.0", text)
        self.results_output.configure(state="disabled")

    def submit(self) -> None:
        """Run the entered expression and show the result or an error."""
        from tkinter import messagebox

        text = self.expression_input.get("1.0", "end-1c")
        try:
            result = run(text, Mode(self.mode.get()))
        except MSDScriptError as err:
            messagebox.showerror("Error", str(err), parent=self.root)
            return
        self._set_results(result)

    def reset(self) -> None:
        """Clear input and output and select evaluation mode."""
        self.expression_input.delete("1.0", "end")
        self._set_results("")
        self.mode.set(Mode.INTERP.value)


def main(argv: list[str] | None = None) -> int:
    """Open the MSDscript window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="msdscript", description="Evaluate or pretty print MSDscript expressions."
    )
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    root.title("MSDscript")
    root.geometry("700x500")
    MainWindow(root)
    root.mainloop()
    return 0