"""dotctl — Hyprland/Arch dotfiles toolkit."""

__version__ = "0.1.0"
