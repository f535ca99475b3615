"""Rich-based Terminal UI for the Programming Activity System.

Modules:
- app.py: Main menu loop and routing
- display.py: Rich renderables for headers, menus and tables
- renderer.py: Formatting utilities
- config.py: TUI styles and constants
"""

__all__ = [
    "app",
    "display",
    "renderer",
    "config",
]
