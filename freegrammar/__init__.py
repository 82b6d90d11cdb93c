"""Context-free grammar analysis: LR(0) automata, FIRST/FOLLOW sets, parsing tables, LaTeX and DOT output."""

__version__ = "0.1.0"

__all__ = ["analysis", "cli", "grammar", "latex", "lr0", "structs"]