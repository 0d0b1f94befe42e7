"""Shared prompt styling for the terminal signup wizard."""

from questionary import Style

STYLE = Style(
    [
        ("qmark", "fg:#9548e2 bold"),
        ("question", "bold"),
        ("answer", "fg:#7c3aed bold"),
        ("pointer", "fg:#9548e2 bold"),
        ("highlighted", "fg:#9548e2 bold"),
        ("selected", "fg:green"),
        ("disabled", "fg:#858585 italic"),
    ]
)
